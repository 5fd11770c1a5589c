"""Typical single-item weights in grams, keyed by singular ingredient name."""

INGREDIENT_WEIGHTS: dict[str, float] = {
    # Eggs
    "egg": 50,
    "large egg": 50,
    "medium egg": 44,
    "small egg": 38,
    "duck egg": 70,
    "quail egg": 9,
    "egg yolk": 18,
    "egg white": 33,
    # Small produce
    "cherry tomato": 15,
    "grape tomato": 12,
    "baby tomato": 15,
    "olive": 4,
    "green olive": 5,
    "kalamata olive": 5,
    "grape": 5,
    "cherry": 8,
    "blueberry": 1,
    "raspberry": 4,
    "blackberry": 5,
    "strawberry": 12,
    "radish": 10,
    "baby corn": 10,
    "garlic clove": 3,
    "clove garlic": 3,
    "clove of garlic": 3,
    "garlic bulb": 40,
    "shallot": 30,
    "spring onion": 15,
    "green onion": 15,
    "scallion": 15,
    "chilli": 15,
    "chili": 15,
    "jalapeño": 15,
    "jalapeno": 15,
    "date": 8,
    "medjool date": 24,
    "dried apricot": 8,
    "prune": 10,
    "walnut": 4,
    "almond": 1.2,
    "pecan": 4,
    "cashew": 1.5,
    "hazelnut": 1.5,
    "brazil nut": 5,
    # Medium produce
    "tomato": 125,
    "plum tomato": 60,
    "roma tomato": 60,
    "vine tomato": 100,
    "beef tomato": 250,
    "onion": 150,
    "red onion": 150,
    "white onion": 150,
    "yellow onion": 150,
    "spanish onion": 200,
    "pepper": 150,
    "bell pepper": 150,
    "red pepper": 150,
    "green pepper": 150,
    "yellow pepper": 160,
    "capsicum": 150,
    "potato": 150,
    "baking potato": 200,
    "new potato": 50,
    "baby potato": 40,
    "sweet potato": 200,
    "carrot": 60,
    "baby carrot": 10,
    "courgette": 200,
    "zucchini": 200,
    "cucumber": 300,
    "aubergine": 300,
    "eggplant": 300,
    "beetroot": 80,
    "parsnip": 100,
    "turnip": 120,
    "leek": 100,
    "celery stick": 40,
    "celery stalk": 40,
    "celery": 40,
    "mushroom": 20,
    "button mushroom": 10,
    "portobello mushroom": 80,
    "avocado": 170,
    "corn cob": 200,
    "corn on the cob": 200,
    # Large produce
    "cabbage": 900,
    "red cabbage": 1000,
    "cauliflower": 600,
    "broccoli": 350,
    "lettuce": 300,
    "iceberg lettuce": 500,
    "little gem lettuce": 100,
    "butternut squash": 1000,
    "pumpkin": 2000,
    "melon": 1000,
    "watermelon": 5000,
    # Fruit
    "apple": 180,
    "pear": 180,
    "banana": 120,
    "orange": 180,
    "clementine": 75,
    "satsuma": 75,
    "mandarin": 75,
    "lemon": 85,
    "lime": 65,
    "grapefruit": 250,
    "peach": 150,
    "nectarine": 140,
    "plum": 65,
    "apricot": 35,
    "mango": 300,
    "pineapple": 900,
    "kiwi": 75,
    "fig": 50,
    "pomegranate": 280,
    "passion fruit": 18,
    # Breads & baked goods
    "tortilla": 65,
    "flour tortilla": 50,
    "corn tortilla": 25,
    "wrap": 65,
    "pitta": 60,
    "pita": 60,
    "naan": 90,
    "chapati": 40,
    "flatbread": 60,
    "bread slice": 30,
    "slice of bread": 30,
    "bread roll": 50,
    "burger bun": 50,
    "bun": 50,
    "bagel": 100,
    "english muffin": 60,
    "crumpet": 40,
    "croissant": 60,
    "muffin": 115,
    "scone": 60,
    "cookie": 30,
    "biscuit": 15,
    "pancake": 40,
    # Meat
    "chicken breast": 175,
    "chicken thigh": 85,
    "chicken leg": 120,
    "chicken drumstick": 75,
    "chicken wing": 35,
    "turkey breast": 200,
    "pork chop": 150,
    "pork loin": 150,
    "lamb chop": 100,
    "lamb cutlet": 80,
    "lamb shank": 250,
    "steak": 200,
    "sirloin steak": 225,
    "ribeye steak": 250,
    "burger patty": 100,
    "meatball": 30,
    "sausage": 60,
    "chipolata": 30,
    "frankfurter": 50,
    "bacon rasher": 25,
    "rasher": 25,
    "bacon strip": 15,
    # Seafood
    "salmon fillet": 150,
    "cod fillet": 150,
    "haddock fillet": 150,
    "tuna steak": 175,
    "fish finger": 28,
    "prawn": 10,
    "king prawn": 15,
    "shrimp": 8,
    "jumbo shrimp": 15,
    "scallop": 20,
    "mussel": 15,
    "clam": 15,
    "oyster": 15,
    # Dairy & plant protein
    "cheese slice": 20,
    "tofu block": 300,
    "veggie burger": 100,
    "falafel": 25,
    # Pasta
    "lasagne sheet": 25,
    "lasagna sheet": 25,
    # Herbs
    "basil leaf": 0.5,
    "mint leaf": 0.3,
    "bay leaf": 0.3,
    "sage leaf": 0.3,
    "curry leaf": 0.2,
}

WEIGHT_DESCRIPTORS: tuple[str, ...] = (
    "fresh",
    "frozen",
    "organic",
    "boneless",
    "skinless",
    "raw",
    "cooked",
    "dried",
    "free range",
)
