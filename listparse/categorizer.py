"""Shopping category inference from an item name."""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from .models import FOOD_CATEGORIES, OTHER_CATEGORY, ListType


def _words(*alternatives: str) -> str:
    return r"\b(?:" + "|".join(alternatives) + r")\b"


# Ordered (pattern, category) rules: the first match wins. Spices come
# first so "dried basil" or "onion powder" never falls through to produce.
_DEFAULT_RULES: tuple[tuple[str, str], ...] = (
    (_words(
        "cumin", "paprika", "chili powder", "cayenne", "cinnamon", "nutmeg",
        "turmeric", "curry powder", "oregano", "dried oregano", "basil",
        "dried basil", "thyme", "dried thyme", "rosemary", "bay leaf",
        "bay leaves", "garlic powder", "onion powder", "seasoning",
        "spice mix", "italian seasoning", "taco seasoning", "cajun",
        "old bay", "cardamom", "coriander seed", "fennel seed",
        "mustard seed", "red pepper flakes?", "crushed red pepper",
        "black pepper", "white pepper", "ground pepper", "peppercorns?",
        "sea salt", "kosher salt", "table salt", "himalayan salt", "salt",
        "msg", "bouillon",
        r"(?<!bell )(?<!green )(?<!red )(?<!sweet )(?<!chili )(?<!yellow )"
        r"(?<!orange )(?<!dr )(?<!jalapeno )pepper(?!\s+jack)",
    ), "Spices & Seasonings"),
    (_words(
        "lettuce", "spinach", "kale", "arugula", "cabbage", "broccoli",
        "cauliflower", "carrots?", "celery", "cucumbers?", "tomato",
        "tomatoes", "bell peppers?", "green peppers?", "red peppers?",
        "yellow peppers?", "orange peppers?", "sweet peppers?", "peppers",
        "jalapenos?", "habaneros?", "serranos?", "poblanos?", "onions?",
        "yellow onion", "red onion", "white onion", "green onions?", "garlic",
        "garlic cloves?", "ginger", "potatoes?", "sweet potatoes?",
        "mushrooms?", "zucchini", "squash", "butternut", "acorn",
        "eggplants?", "corn", "asparagus", "green beans?", "snap peas?",
        "snow peas?", "bean sprouts?", "avocados?", "lemons?", "limes?",
        "oranges?", "apples?", "bananas?", "grapes?", "berries",
        "strawberr(?:y|ies)", "blueberr(?:y|ies)", "raspberr(?:y|ies)",
        "blackberr(?:y|ies)", "mangos?", "mangoes", "pineapples?", "melons?",
        "watermelons?", "cantaloupe", "honeydew", "peach", "peaches",
        "pears?", "plums?", "cherries", "cilantro", "coriander leaves",
        "parsley", "fresh basil", "fresh mint", "mint", "fresh rosemary",
        "fresh thyme", "fresh oregano", "fresh dill", "dill", "chives?",
        "scallions?", "leeks?", "shallots?", "romaine", "iceberg",
        "mixed greens", "salad mix", "coleslaw mix", "stir fry mix",
    ), "Produce"),
    (_words(
        "beef", "steaks?", "ground beef", "beef mince", "mince", "sirloin",
        "ribeye", "chuck", "brisket", "flank", "skirt", "chicken",
        "chicken breasts?", "chicken thighs?", "chicken wings?",
        "chicken drum(?:stick)?s?", "whole chicken", "ground chicken", "pork",
        "pork chops?", "pork loin", "pork tenderloin", "ground pork",
        "pork belly", "bacon", "sausages?", "italian sausage",
        "breakfast sausage", "chorizo", "ham", "prosciutto", "turkey",
        "ground turkey", "turkey breast", "lamb", "ground lamb", "lamb chops?",
        "veal", "duck", "fish", "salmon", "tuna", "tilapia", "cod",
        "halibut", "mahi", "sea bass", "trout", "catfish", "shrimp",
        "prawns?", "crab", "lobster", "scallops?", "clams?", "mussels?",
        "oysters?", "calamari", "squid", "octopus", "anchovies", "anchovy",
        "sardines?",
    ), "Meat & Seafood"),
    (_words(
        "milk", "whole milk", "skim milk", "2% milk", "oat milk",
        "almond milk", "soy milk", "coconut milk", "cream", "heavy cream",
        "whipping cream", "half and half", "sour cream", "creme fraiche",
        "cheese", "cheddar", "mozzarella", "parmesan", "pecorino", "feta",
        "goat cheese", "brie", "camembert", "gruyere", "swiss", "provolone",
        "american cheese", "cream cheese", "cottage cheese", "ricotta",
        "mascarpone", "queso", "jack cheese", "monterey jack", "colby",
        "pepper jack", "blue cheese", "gorgonzola", "butter",
        "unsalted butter", "salted butter", "margarine", "ghee", "yogurt",
        "greek yogurt", "plain yogurt", "eggs?", "egg whites?", "egg yolks?",
    ), "Dairy"),
    (_words(
        "bread", "white bread", "wheat bread", "sourdough", "rye bread",
        "pumpernickel", "ciabatta", "focaccia", "loaf", "loaves",
        "baguettes?", "french bread", "rolls?", "dinner rolls?", "buns?",
        "hamburger buns?", "hot dog buns?", "croissants?", "muffins?",
        "english muffins?", "bagels?", "pita", "pita bread", "naan",
        "flatbread", "tortillas?", "flour tortillas?", "corn tortillas?",
        "wraps?", "lavash", "crackers", "breadcrumbs", "panko", "croutons",
    ), "Bread"),
    (_words(
        "pasta", "spaghetti", "linguine", "fettuccine", "penne", "rigatoni",
        "ziti", "farfalle", "rotini", "fusilli", "macaroni", "orzo",
        "lasagna", "lasagne", "egg noodles?", "rice noodles?", "noodles?",
        "ramen", "udon", "soba", "rice", "white rice", "brown rice",
        "jasmine rice", "basmati", "arborio", "wild rice", "risotto",
        "quinoa", "couscous", "bulgur", "farro", "barley", "oats?",
        "oatmeal", "steel cut oats", "rolled oats", "grits", "polenta",
        "cornmeal",
    ), "Pasta & Rice"),
    (_words(
        "canned", "can of", "tomato paste", "tomato sauce", "passata",
        "crushed tomatoes?", "diced tomatoes?", "stewed tomatoes?",
        "tomato puree", "marinara", "pizza sauce", "beans?", "black beans?",
        "pinto beans?", "kidney beans?", "cannellini", "navy beans?",
        "great northern", "chickpeas?", "garbanzo", "lentils?",
        "baked beans", "refried beans", "canned corn", "canned peas",
        "canned carrots", "soup", "chicken soup", "tomato soup",
        "vegetable soup", "broth", "chicken broth", "beef broth",
        "vegetable broth", "stock", "chicken stock", "beef stock",
        "bone broth", "coconut cream", "evaporated milk", "condensed milk",
        "sweetened condensed", "pumpkin puree", "apple sauce",
        "applesauce", "cranberry sauce", r"olives?(?!\s+oil)",
        "artichoke hearts?", "roasted peppers?", "chipotle", "adobo",
        "enchilada sauce", "green chil(?:e|i|ies|es)", "diced chil(?:e|i|ies|es)",
    ), "Canned Goods"),
    (_words(
        "ketchup", "catsup", "mustard", "dijon", "yellow mustard",
        "spicy mustard", "mayonnaise", "mayo", "aioli", "hot sauce",
        "sriracha", "tabasco", "frank's", "cholula", "tapatio", "soy sauce",
        "tamari", "coconut aminos", "teriyaki", "hoisin", "oyster sauce",
        "fish sauce", "worcestershire", "bbq sauce", "barbecue",
        "buffalo sauce", "wing sauce", "salsa", "pico de gallo", "verde",
        "roja", "hummus", "guacamole", "tzatziki", "ranch",
        "blue cheese dressing", "italian dressing", "caesar", "vinaigrette",
        "balsamic", "balsamic vinegar", "red wine vinegar",
        "white wine vinegar", "apple cider vinegar", "rice vinegar",
        "vinegar", "olive oil", "extra virgin", "vegetable oil",
        "canola oil", "coconut oil", "avocado oil", "sesame oil",
        "peanut oil", "cooking spray", "pam",
    ), "Condiments"),
    (_words(
        "flour", "all[- ]purpose flour", "bread flour", "cake flour",
        "pastry flour", "whole wheat flour", "almond flour", "coconut flour",
        "self[- ]rising", "sugar", "white sugar", "granulated sugar",
        "brown sugar", "powdered sugar", "confectioners", "turbinado",
        "coconut sugar", "maple syrup", "honey", "molasses", "corn syrup",
        "agave", "stevia", "splenda", "baking soda", "baking powder",
        "yeast", "active dry yeast", "instant yeast", "cream of tartar",
        "cornstarch", "arrowroot", "vanilla", "vanilla extract",
        "vanilla bean", "almond extract", "lemon extract", "cocoa",
        "cocoa powder", "dutch process", "chocolate chips?",
        "baking chocolate", "unsweetened chocolate", "semi[- ]sweet",
        "dark chocolate chips", "white chocolate", "sprinkles",
        "food coloring", "gel color",
    ), "Baking Supplies"),
    (_words(
        "chips?", "potato chips?", "tortilla chips?", "corn chips?",
        "pita chips?", "veggie chips?", "crisps?", "crackers?", "ritz",
        "triscuit", "wheat thins", "goldfish", "cheez[- ]its?", "pretzels?",
        "popcorn", "microwave popcorn", "nuts?", "mixed nuts", "almonds?",
        "cashews?", "peanuts?", "walnuts?", "pecans?", "pistachios?",
        "macadamia", "trail mix", "granola", "granola bars?", "protein bars?",
        "energy bars?", "candy", "candies", "chocolate bars?", "m&ms?",
        "skittles", "gummy", "gummies", "licorice", "cookies?", "oreos?",
    ), "Snacks"),
    (_words(
        "water", "bottled water", "sparkling water", "seltzer", "club soda",
        "tonic", "juice", "orange juice", "apple juice", "grape juice",
        "cranberry juice", "tomato juice", "lemonade", "limeade", "soda",
        "pop", "cola", "coke", "pepsi", "sprite", "ginger ale", "root beer",
        "dr pepper", "mountain dew", "energy drinks?", "red bull", "monster",
        "gatorade", "powerade", "coffee", "ground coffee", "coffee beans",
        "instant coffee", "k[- ]cups?", "tea", "black tea", "green tea",
        "herbal tea", "chai", "iced tea", "kombucha", "wine", "red wine",
        "white wine", "rose", "champagne", "prosecco", "beer", "ale",
        "lager", "ipa", "stout", "cider", "hard seltzer", "vodka", "rum",
        "whiskey", "bourbon", "tequila", "gin", "brandy",
    ), "Beverages"),
    (_words(
        "frozen", "ice cream", "gelato", "sorbet", "frozen yogurt",
        "popsicles?", "ice pops?", "frozen pizza", "frozen dinner",
        "tv dinner", "frozen vegetables?", "frozen fruit", "frozen berries",
        "ice", "ice cubes", "frozen waffles?", "frozen pancakes?",
        "frozen burritos?", "hot pockets?", "pizza rolls?", "tater tots?",
        "frozen fries", "frozen hash browns?",
    ), "Frozen"),
    (_words(
        "cereal", "cheerios", "frosted flakes", "corn flakes", "raisin bran",
        "granola cereal", "muesli", "oatmeal packets?", "instant oatmeal",
        "pancake mix", "waffle mix", "bisquick", "syrup", "maple syrup",
        "pancake syrup", "jam", "jelly", "preserves", "marmalade",
        "peanut butter", "almond butter", "sunflower butter", "nutella",
        "hazelnut spread", "pop[- ]tarts?", "toaster strudel",
        "breakfast bars?",
    ), "Breakfast"),
    (_words(
        "paper towels?", "toilet paper", "tissues?", "kleenex", "napkins?",
        "aluminum foil", "tin foil", "plastic wrap", "saran wrap",
        "cling wrap", "parchment paper", "wax paper", "ziploc",
        "storage bags?", "trash bags?", "garbage bags?", "dish soap",
        "dishwasher detergent", "laundry detergent", "fabric softener",
        "dryer sheets?", "bleach", "cleaning", "cleaner", "wipes?",
        "sponges?", "scrubbers?",
    ), "Household"),
    (_words(
        "shampoo", "conditioner", "body wash", "soap", "bar soap",
        "hand soap", "lotion", "moisturizer", "sunscreen", "deodorant",
        "toothpaste", "toothbrush", "mouthwash", "floss", "razors?",
        "shaving cream", "tampons?", "pads?", "diapers?", "baby wipes?",
        "band[- ]aids?", "bandages?", "medicine", "vitamins?", "supplements?",
        "pain relief", "advil", "tylenol", "ibuprofen",
    ), "Personal Care"),
)

# Wishlist items are not food; they get their own ordered table.
_WISHLIST_RULES: tuple[tuple[str, str], ...] = (
    (_words(
        "phones?", "iphone", "smartphones?", "laptops?", "computers?", "tablets?",
        "ipad", "headphones", "earbuds", "airpods", "speakers?", "tv", "television",
        "monitors?", "keyboards?", "mouse", "chargers?", "cables?", "electronics",
        "cameras?", "watch", "smartwatch", "gaming", "playstation", "ps5", "xbox",
        "nintendo", "switch", "consoles?", "controllers?",
    ), "Electronics"),
    (_words(
        "shirts?", "t-shirts?", "pants", "jeans", "dress(?:es)?", "shoes", "jackets?",
        "coats?", "sweaters?", "hoodies?", "socks", "underwear", "hats?", "caps?",
        "scarf", "scarves", "gloves", "clothing", "clothes", "outfits?", "shorts",
        "skirts?", "suits?", "ties?", "belts?", "boots", "sneakers", "sandals",
    ), "Clothing"),
    (_words(
        "books?", "textbooks?", "novels?", "ebooks?", "kindle", "reading",
        "magazines?", "journals?",
    ), "Books"),
    (_words(
        "furniture", "couch", "sofa", "chairs?", "tables?", "desks?", "bed",
        "mattress", "pillows?", "blankets?", "rugs?", "curtains?", "lamps?",
        "plants?", "garden", "home", "decor", "decorations?", "frames?",
        "mirrors?", "shelf", "shelves", "storage", "organizers?",
    ), "Home & Garden"),
    (_words(
        "balls?", "basketball", "football", "soccer", "baseball", "tennis", "golf",
        "bikes?", "bicycles?", "skateboards?", "helmets?", "camping", "tents?",
        "hiking", "fishing", "sports", "outdoors?", "gym", "workout", "fitness",
        "weights", "yoga mat", "running shoes",
    ), "Sports & Outdoors"),
    (_words(
        "games?", "video games?", "board games?", "movies?", "dvds?", "blu-ray",
        "music", "albums?", "vinyl", "records?", "instruments?", "guitars?",
        "pianos?", "entertainment", "streaming", "subscriptions?",
    ), "Entertainment"),
    (_words(
        "pans?", "pots?", "knife", "knives", "cutting boards?", "blenders?",
        "mixers?", "toasters?", "microwaves?", "coffee makers?", "instant pot",
        "air fryer", "utensils?", "spatulas?", "whisks?", "bowls?", "plates?",
        "cups?", "mugs?", "glass(?:es)?", "tupperware", "containers?", "kitchen",
    ), "Kitchen"),
    (_words(
        "notebooks?", "pens?", "pencils?", "highlighters?", "markers?", "binders?",
        "folders?", "backpacks?", "calculators?", "rulers?", "erasers?",
        "staplers?", "tape", "scissors", "glue", "index cards", "flashcards",
        "school supplies", "school", "planners?", "water ?bottles?",
        "lunch ?box(?:es)?",
    ), "School Supplies"),
    (_words(
        "gifts?", "presents?", "gift cards?", "birthday", "christmas", "holiday",
        "anniversary", "wedding",
    ), "Gifts"),
)


class Categorizer:
    """Maps item names to shopping categories with ordered regex rules."""

    def __init__(self, rules: Iterable[tuple[str | re.Pattern, str]] | None = None) -> None:
        source = _DEFAULT_RULES if rules is None else rules
        self._rules: tuple[tuple[re.Pattern, str], ...] = tuple(
            (
                pattern if isinstance(pattern, re.Pattern)
                else re.compile(pattern, re.IGNORECASE),
                category,
            )
            for pattern, category in source
        )

    @property
    def rules(self) -> tuple[tuple[re.Pattern, str], ...]:
        return self._rules

    def categorize(self, name: str) -> str:
        """Return the category of the first matching rule, else "Other"."""
        if not name:
            return OTHER_CATEGORY
        lowered = name.lower()
        for pattern, category in self._rules:
            if pattern.search(lowered):
                return category
        return OTHER_CATEGORY

    def with_keywords(self, keywords: Mapping[str, Iterable[str]]) -> Categorizer:
        """Return a categorizer that checks custom keywords before these rules.

        Args:
            keywords: category label → keywords, e.g. {"Bakery": ["croissant"]}

        Raises:
            ValueError: If a label is not one of FOOD_CATEGORIES.
        """
        custom: list[tuple[re.Pattern, str]] = []
        for category, words in keywords.items():
            if category not in FOOD_CATEGORIES:
                raise ValueError(
                    f"Unknown category: {category!r}  "
                    f"(choose from {', '.join(FOOD_CATEGORIES)})"
                )
            words = [w.strip().lower() for w in words if w and w.strip()]
            if not words:
                continue
            pattern = _words(*(re.escape(w) for w in words))
            custom.append((re.compile(pattern, re.IGNORECASE), category))
        return Categorizer([*custom, *self._rules])


DEFAULT_CATEGORIZER = Categorizer()
WISHLIST_CATEGORIZER = Categorizer(_WISHLIST_RULES)


def categorize_item(name: str, list_type: ListType | str = ListType.GROCERY) -> str:
    """Categorize a single item name with the built-in rules.

    Wishlist names use the wishlist table (Electronics, Clothing, ...);
    grocery and pantry names use the food table.
    """
    if ListType.coerce(list_type) is ListType.WISHLIST:
        return WISHLIST_CATEGORIZER.categorize(name)
    return DEFAULT_CATEGORIZER.categorize(name)
