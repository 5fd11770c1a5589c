"""Curated per-100g nutrient data for common ingredients.

Values follow USDA FoodData Central. Tuples are ordered as calories (kcal),
protein, carbs, fat, fiber, sugar (g) and sodium (mg).
"""

SeedRow = tuple[float, float, float, float, float, float, float]

SEED_NUTRIENTS: dict[str, SeedRow] = {
    # Poultry
    "chicken breast": (165, 31, 0, 3.6, 0, 0, 74),
    "chicken thigh": (209, 26, 0, 10.9, 0, 0, 84),
    "chicken drumstick": (172, 28, 0, 5.7, 0, 0, 90),
    "chicken wing": (203, 30, 0, 8.1, 0, 0, 82),
    "chicken leg": (184, 27, 0, 8, 0, 0, 88),
    "chicken mince": (143, 17, 0, 8, 0, 0, 77),
    "ground chicken": (143, 17, 0, 8, 0, 0, 77),
    "chicken liver": (119, 17, 1, 5, 0, 0, 71),
    "chicken skin": (349, 13, 0, 32, 0, 0, 65),
    "whole chicken": (215, 18, 0, 15, 0, 0, 70),
    "rotisserie chicken": (190, 25, 0, 10, 0, 0, 350),
    "turkey breast": (135, 30, 0, 1, 0, 0, 50),
    "turkey mince": (148, 20, 0, 7, 0, 0, 72),
    "ground turkey": (148, 20, 0, 7, 0, 0, 72),
    "turkey thigh": (140, 28, 0, 2.5, 0, 0, 65),
    "turkey leg": (144, 28, 0, 3, 0, 0, 68),
    "duck breast": (201, 23, 0, 11, 0, 0, 65),
    "duck leg": (217, 27, 0, 12, 0, 0, 70),
    "whole duck": (337, 19, 0, 28, 0, 0, 63),
    "goose": (238, 29, 0, 13, 0, 0, 73),
    "pheasant": (133, 24, 0, 3.6, 0, 0, 40),
    "quail": (134, 22, 0, 4.5, 0, 0, 52),
    "cornish hen": (220, 19, 0, 16, 0, 0, 67),
    "chicken stock": (4, 0.5, 0.3, 0.1, 0, 0.2, 300),
    "chicken broth": (4, 0.5, 0.3, 0.1, 0, 0.2, 300),
    # Beef
    "beef mince": (254, 17, 0, 20, 0, 0, 66),
    "ground beef": (254, 17, 0, 20, 0, 0, 66),
    "lean beef mince": (176, 20, 0, 10, 0, 0, 66),
    "lean ground beef": (176, 20, 0, 10, 0, 0, 66),
    "beef steak": (271, 26, 0, 18, 0, 0, 54),
    "sirloin steak": (244, 27, 0, 15, 0, 0, 56),
    "ribeye steak": (291, 24, 0, 22, 0, 0, 58),
    "fillet steak": (218, 28, 0, 11, 0, 0, 52),
    "filet mignon": (218, 28, 0, 11, 0, 0, 52),
    "rump steak": (234, 28, 0, 13, 0, 0, 55),
    "t-bone steak": (247, 24, 0, 16, 0, 0, 58),
    "flank steak": (194, 27, 0, 9, 0, 0, 60),
    "skirt steak": (221, 26, 0, 12, 0, 0, 65),
    "beef brisket": (331, 21, 0, 27, 0, 0, 63),
    "beef roast": (250, 26, 0, 16, 0, 0, 55),
    "beef ribs": (291, 24, 0, 21, 0, 0, 58),
    "short ribs": (295, 22, 0, 23, 0, 0, 60),
    "beef chuck": (259, 26, 0, 17, 0, 0, 62),
    "beef shin": (201, 29, 0, 9, 0, 0, 58),
    "beef shank": (201, 29, 0, 9, 0, 0, 58),
    "stewing beef": (250, 26, 0, 16, 0, 0, 55),
    "braising steak": (250, 26, 0, 16, 0, 0, 55),
    "beef liver": (135, 20, 4, 4, 0, 0, 69),
    "beef kidney": (99, 17, 0.3, 3, 0, 0, 182),
    "beef tongue": (224, 15, 3, 17, 0, 0, 69),
    "oxtail": (262, 30, 0, 15, 0, 0, 50),
    "corned beef": (251, 27, 0.5, 15, 0, 0, 973),
    "beef jerky": (410, 33, 11, 26, 0, 9, 2081),
    "beef stock": (7, 0.7, 0.4, 0.2, 0, 0.2, 300),
    "beef broth": (7, 0.7, 0.4, 0.2, 0, 0.2, 300),
    # Pork
    "pork": (242, 27, 0, 14, 0, 0, 62),
    "pork chop": (231, 25, 0, 14, 0, 0, 58),
    "pork loin": (196, 27, 0, 9, 0, 0, 52),
    "pork tenderloin": (143, 26, 0, 4, 0, 0, 48),
    "pork fillet": (143, 26, 0, 4, 0, 0, 48),
    "pork belly": (518, 9, 0, 53, 0, 0, 32),
    "pork shoulder": (269, 24, 0, 19, 0, 0, 67),
    "pork ribs": (277, 23, 0, 20, 0, 0, 75),
    "spare ribs": (277, 23, 0, 20, 0, 0, 75),
    "pork mince": (263, 17, 0, 21, 0, 0, 66),
    "ground pork": (263, 17, 0, 21, 0, 0, 66),
    "pork leg": (233, 26, 0, 14, 0, 0, 58),
    "pork roast": (242, 27, 0, 14, 0, 0, 62),
    "bacon": (417, 13, 1, 40, 0, 0, 1717),
    "streaky bacon": (417, 13, 1, 40, 0, 0, 1717),
    "back bacon": (215, 25, 0.5, 12, 0, 0, 1329),
    "pancetta": (460, 12, 0, 46, 0, 0, 1684),
    "ham": (145, 21, 1.5, 6, 0, 1, 1203),
    "gammon": (167, 23, 0, 8, 0, 0, 1100),
    "prosciutto": (250, 26, 0.3, 16, 0, 0, 1520),
    "serrano ham": (241, 31, 0.5, 12, 0, 0, 2100),
    "chorizo": (455, 24, 2, 38, 0, 1, 1235),
    "sausage": (301, 12, 2, 27, 0, 1, 749),
    "pork sausage": (301, 12, 2, 27, 0, 1, 749),
    "pork liver": (134, 21, 3, 4, 0, 0, 87),
    # Lamb
    "lamb": (294, 25, 0, 21, 0, 0, 66),
    "lamb chop": (294, 25, 0, 21, 0, 0, 66),
    "lamb leg": (243, 26, 0, 15, 0, 0, 60),
    "lamb shoulder": (292, 24, 0, 21, 0, 0, 65),
    "lamb rack": (310, 24, 0, 23, 0, 0, 68),
    "lamb loin": (263, 26, 0, 17, 0, 0, 62),
    "lamb shank": (201, 29, 0, 9, 0, 0, 58),
    "lamb mince": (283, 17, 0, 23, 0, 0, 70),
    "ground lamb": (283, 17, 0, 23, 0, 0, 70),
    "lamb liver": (139, 21, 2, 5, 0, 0, 76),
    "lamb kidney": (97, 16, 1, 3, 0, 0, 156),
    "mutton": (294, 25, 0, 21, 0, 0, 72),
    "hogget": (280, 25, 0, 20, 0, 0, 68),
    "lamb neck": (276, 22, 0, 20, 0, 0, 64),
    "lamb breast": (359, 19, 0, 31, 0, 0, 70),
    # Fish
    "salmon": (208, 20, 0, 13, 0, 0, 59),
    "salmon fillet": (208, 20, 0, 13, 0, 0, 59),
    "smoked salmon": (117, 18, 0, 4.3, 0, 0, 784),
    "cod": (82, 18, 0, 0.7, 0, 0, 54),
    "cod fillet": (82, 18, 0, 0.7, 0, 0, 54),
    "haddock": (90, 20, 0, 0.6, 0, 0, 213),
    "pollock": (92, 19, 0, 1, 0, 0, 86),
    "tuna": (144, 23, 0, 5, 0, 0, 47),
    "tuna steak": (144, 23, 0, 5, 0, 0, 47),
    "canned tuna": (116, 26, 0, 0.8, 0, 0, 338),
    "tinned tuna": (116, 26, 0, 0.8, 0, 0, 338),
    "sea bass": (97, 18, 0, 2, 0, 0, 68),
    "sea bream": (100, 19, 0, 2.5, 0, 0, 70),
    "trout": (148, 21, 0, 6.6, 0, 0, 52),
    "rainbow trout": (148, 21, 0, 6.6, 0, 0, 52),
    "mackerel": (262, 24, 0, 18, 0, 0, 90),
    "smoked mackerel": (305, 19, 0, 25, 0, 0, 610),
    "sardines": (208, 25, 0, 11, 0, 0, 505),
    "anchovies": (210, 29, 0, 10, 0, 0, 3668),
    "herring": (203, 23, 0, 12, 0, 0, 90),
    "kipper": (217, 25, 0, 13, 0, 0, 990),
    "halibut": (111, 21, 0, 2.3, 0, 0, 69),
    "sole": (91, 19, 0, 1.2, 0, 0, 81),
    "plaice": (91, 19, 0, 1.2, 0, 0, 78),
    "tilapia": (96, 20, 0, 1.7, 0, 0, 52),
    "catfish": (119, 18, 0, 5, 0, 0, 50),
    "swordfish": (144, 24, 0, 5, 0, 0, 102),
    "monkfish": (76, 15, 0, 1.5, 0, 0, 20),
    "red snapper": (100, 21, 0, 1.3, 0, 0, 64),
    "grouper": (92, 20, 0, 1, 0, 0, 53),
    "mahi mahi": (85, 19, 0, 0.7, 0, 0, 88),
    "perch": (91, 19, 0, 0.9, 0, 0, 62),
    "pike": (88, 19, 0, 0.7, 0, 0, 39),
    "carp": (127, 18, 0, 6, 0, 0, 49),
    "eel": (184, 18, 0, 12, 0, 0, 51),
    "white fish": (90, 19, 0, 1, 0, 0, 70),
    "fish fingers": (220, 12, 18, 11, 1, 1, 450),
    "fish cakes": (188, 9, 17, 9, 1, 1, 420),
    "fish stock": (8, 1, 0.5, 0.2, 0, 0, 280),
    "fish sauce": (35, 5, 4, 0, 0, 3, 7851),
    # Seafood/shellfish
    "prawns": (99, 24, 0.2, 0.3, 0, 0, 111),
    "shrimp": (99, 24, 0.2, 0.3, 0, 0, 111),
    "king prawns": (105, 24, 0, 1, 0, 0, 148),
    "tiger prawns": (105, 24, 0, 1, 0, 0, 148),
    "crab": (97, 19, 0, 2, 0, 0, 395),
    "crab meat": (97, 19, 0, 2, 0, 0, 395),
    "lobster": (89, 19, 0, 0.9, 0, 0, 486),
    "scallops": (88, 17, 3, 0.8, 0, 0, 392),
    "mussels": (86, 12, 4, 2.2, 0, 0, 286),
    "clams": (74, 13, 3, 1, 0, 0, 601),
    "oysters": (68, 7, 4, 2.5, 0, 0, 211),
    "squid": (92, 16, 3, 1.4, 0, 0, 44),
    "calamari": (92, 16, 3, 1.4, 0, 0, 44),
    "octopus": (82, 15, 2, 1, 0, 0, 230),
    "cockles": (53, 12, 0, 0.6, 0, 0, 314),
    "whelks": (137, 24, 8, 1, 0, 0, 206),
    "crayfish": (77, 16, 0, 1, 0, 0, 97),
    "langoustine": (90, 19, 0, 1, 0, 0, 200),
    "surimi": (99, 6, 15, 1, 0, 6, 841),
    "crab sticks": (99, 6, 15, 1, 0, 6, 841),
    "caviar": (264, 25, 4, 18, 0, 0, 1500),
    "fish roe": (143, 22, 2, 5, 0, 0, 91),
    "smoked haddock": (101, 23, 0, 0.9, 0, 0, 763),
    "kippers": (217, 25, 0, 13, 0, 0, 990),
    "seafood mix": (85, 16, 2, 1.2, 0, 0, 280),
    # Dairy
    "milk": (42, 3.4, 5, 1, 0, 5, 44),
    "whole milk": (61, 3.2, 4.8, 3.3, 0, 5, 43),
    "semi-skimmed milk": (46, 3.4, 4.8, 1.7, 0, 5, 44),
    "skimmed milk": (34, 3.4, 5, 0.1, 0, 5, 45),
    "buttermilk": (40, 3.3, 4.8, 0.9, 0, 4.8, 105),
    "condensed milk": (321, 8, 54, 9, 0, 54, 142),
    "evaporated milk": (134, 7, 10, 8, 0, 10, 106),
    "cream": (340, 2.1, 2.8, 37, 0, 2.8, 34),
    "double cream": (449, 1.7, 2.6, 48, 0, 2.6, 26),
    "single cream": (195, 2.6, 3.7, 19, 0, 3.7, 41),
    "whipping cream": (340, 2.1, 2.8, 37, 0, 2.8, 34),
    "clotted cream": (586, 1.6, 2.3, 63, 0, 2.3, 20),
    "sour cream": (193, 2.4, 4.6, 20, 0, 3.4, 53),
    "creme fraiche": (292, 2.4, 2.6, 30, 0, 2.6, 35),
    "butter": (717, 0.9, 0.1, 81, 0, 0.1, 11),
    "unsalted butter": (717, 0.9, 0.1, 81, 0, 0.1, 11),
    "salted butter": (717, 0.9, 0.1, 81, 0, 0.1, 576),
    "ghee": (876, 0, 0, 100, 0, 0, 2),
    "cheese": (402, 25, 1.3, 33, 0, 0.5, 621),
    "cheddar": (402, 25, 1.3, 33, 0, 0.5, 621),
    "cheddar cheese": (402, 25, 1.3, 33, 0, 0.5, 621),
    "mature cheddar": (410, 25, 0.1, 34, 0, 0.1, 700),
    "mild cheddar": (402, 25, 1.3, 33, 0, 0.5, 621),
    "mozzarella": (280, 28, 3, 17, 0, 1, 627),
    "parmesan": (431, 38, 4, 29, 0, 0.9, 1529),
    "feta": (264, 14, 4, 21, 0, 4, 917),
    "feta cheese": (264, 14, 4, 21, 0, 4, 917),
    "goat cheese": (364, 22, 0.1, 30, 0, 0.1, 515),
    "brie": (334, 21, 0.5, 28, 0, 0.5, 629),
    "camembert": (299, 20, 0.5, 24, 0, 0.5, 842),
    "stilton": (410, 24, 0.1, 35, 0, 0.1, 930),
    "blue cheese": (353, 21, 2, 29, 0, 0.5, 1395),
    "cream cheese": (342, 6, 4, 34, 0, 4, 321),
    "cottage cheese": (98, 11, 3.4, 4.3, 0, 2.7, 364),
    "ricotta": (174, 11, 3, 13, 0, 0.3, 84),
    "mascarpone": (429, 4.8, 4.4, 44, 0, 3.5, 41),
    "halloumi": (321, 21, 3, 25, 0, 1, 1200),
    "gruyere": (413, 30, 0.4, 32, 0, 0.4, 336),
    "emmental": (379, 29, 0, 29, 0, 0, 196),
    "edam": (357, 25, 1.4, 28, 0, 1.4, 812),
    # Eggs & egg products
    "egg": (155, 13, 1.1, 11, 0, 1.1, 124),
    "eggs": (155, 13, 1.1, 11, 0, 1.1, 124),
    "egg white": (52, 11, 0.7, 0.2, 0, 0.7, 166),
    "egg yolk": (322, 16, 3.6, 27, 0, 0.6, 48),
    "quail egg": (158, 13, 0.4, 11, 0, 0.4, 141),
    "duck egg": (185, 13, 1.4, 14, 0, 1, 146),
    "goose egg": (185, 14, 1.4, 13, 0, 1, 138),
    "liquid egg": (138, 10, 1.6, 10, 0, 1.6, 130),
    "egg substitute": (44, 9, 1.2, 0, 0, 1, 200),
    "mayonnaise": (680, 1, 0.6, 75, 0, 0.6, 635),
    # Yogurt & fermented dairy
    "yogurt": (59, 10, 3.6, 0.7, 0, 3.2, 36),
    "yoghurt": (59, 10, 3.6, 0.7, 0, 3.2, 36),
    "greek yogurt": (97, 9, 3.6, 5, 0, 3.6, 47),
    "greek yoghurt": (97, 9, 3.6, 5, 0, 3.6, 47),
    "greek yogurt 0%": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "greek yoghurt 0%": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "0% greek yogurt": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "0% greek yoghurt": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "fat free greek yogurt": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "fat free greek yoghurt": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "nonfat greek yogurt": (59, 10, 3.6, 0.2, 0, 3.2, 36),
    "natural yogurt": (61, 3.5, 4.7, 3.3, 0, 4.7, 46),
    "low fat yogurt": (56, 5, 7.7, 0.7, 0, 7.7, 76),
    "fat free yogurt": (46, 4.4, 6.5, 0.2, 0, 4.5, 52),
    "coconut yogurt": (180, 2, 10, 15, 0, 6, 10),
    "kefir": (41, 3.3, 4.5, 1, 0, 4.5, 40),
    "labneh": (230, 10, 6, 20, 0, 5, 350),
    "skyr": (63, 11, 4, 0.2, 0, 3.5, 45),
    "fromage frais": (113, 6, 5, 8, 0, 5, 40),
    "quark": (67, 12, 4, 0.3, 0, 4, 40),
    "ayran": (35, 2, 3, 2, 0, 3, 200),
    "paneer": (321, 25, 4, 23, 0, 2, 18),
    # Vegetables
    "onion": (40, 1.1, 9.3, 0.1, 1.7, 4.2, 4),
    "onions": (40, 1.1, 9.3, 0.1, 1.7, 4.2, 4),
    "red onion": (40, 1.1, 9.3, 0.1, 1.7, 4.2, 4),
    "white onion": (40, 1.1, 9.3, 0.1, 1.7, 4.2, 4),
    "spring onion": (32, 1.8, 7.3, 0.2, 2.6, 2.3, 16),
    "spring onions": (32, 1.8, 7.3, 0.2, 2.6, 2.3, 16),
    "shallot": (72, 2.5, 17, 0.1, 3.2, 8, 12),
    "shallots": (72, 2.5, 17, 0.1, 3.2, 8, 12),
    "leek": (61, 1.5, 14, 0.3, 1.8, 3.9, 20),
    "leeks": (61, 1.5, 14, 0.3, 1.8, 3.9, 20),
    "garlic": (149, 6.4, 33, 0.5, 2.1, 1, 17),
    "garlic clove": (149, 6.4, 33, 0.5, 2.1, 1, 17),
    "tomato": (18, 0.9, 3.9, 0.2, 1.2, 2.6, 5),
    "tomatoes": (18, 0.9, 3.9, 0.2, 1.2, 2.6, 5),
    "cherry tomatoes": (18, 0.9, 3.9, 0.2, 1.2, 2.6, 5),
    "plum tomatoes": (18, 0.9, 3.9, 0.2, 1.2, 2.6, 5),
    "sun-dried tomatoes": (258, 14, 56, 3, 12, 38, 2095),
    "potato": (77, 2, 17, 0.1, 2.2, 0.8, 6),
    "potatoes": (77, 2, 17, 0.1, 2.2, 0.8, 6),
    "sweet potato": (86, 1.6, 20, 0.1, 3, 4.2, 55),
    "sweet potatoes": (86, 1.6, 20, 0.1, 3, 4.2, 55),
    "new potatoes": (70, 1.9, 16, 0.1, 1.8, 1.3, 4),
    "carrot": (41, 0.9, 10, 0.2, 2.8, 4.7, 69),
    "carrots": (41, 0.9, 10, 0.2, 2.8, 4.7, 69),
    "parsnip": (75, 1.2, 18, 0.3, 4.9, 4.8, 10),
    "parsnips": (75, 1.2, 18, 0.3, 4.9, 4.8, 10),
    "turnip": (28, 0.9, 6.4, 0.1, 1.8, 3.8, 67),
    "swede": (38, 1.1, 8.6, 0.2, 2.3, 4.5, 12),
    "beetroot": (43, 1.6, 10, 0.2, 2.8, 7, 78),
    "radish": (16, 0.7, 3.4, 0.1, 1.6, 1.9, 39),
    "celery": (16, 0.7, 3, 0.2, 1.6, 1.3, 80),
    "celeriac": (42, 1.5, 9.2, 0.3, 1.8, 1.6, 100),
    "broccoli": (34, 2.8, 7, 0.4, 2.6, 1.7, 33),
    "cauliflower": (25, 1.9, 5, 0.3, 2, 1.9, 30),
    "cabbage": (25, 1.3, 5.8, 0.1, 2.5, 3.2, 18),
    "red cabbage": (31, 1.4, 7.4, 0.2, 2.1, 3.8, 27),
    "savoy cabbage": (27, 2, 6.1, 0.1, 3.1, 2.3, 28),
    "brussels sprouts": (43, 3.4, 9, 0.3, 3.8, 2.2, 25),
    "kale": (49, 4.3, 9, 0.9, 3.6, 2.3, 38),
    "spinach": (23, 2.9, 3.6, 0.4, 2.2, 0.4, 79),
    "lettuce": (15, 1.4, 2.9, 0.2, 1.3, 0.8, 28),
    "iceberg lettuce": (14, 0.9, 3, 0.1, 1.2, 2, 10),
    "romaine lettuce": (17, 1.2, 3.3, 0.3, 2.1, 1.2, 8),
    "rocket": (25, 2.6, 3.7, 0.7, 1.6, 2, 27),
    "arugula": (25, 2.6, 3.7, 0.7, 1.6, 2, 27),
    "watercress": (11, 2.3, 1.3, 0.1, 0.5, 0.2, 41),
    "swiss chard": (19, 1.8, 3.7, 0.2, 1.6, 1.1, 213),
    "chard": (19, 1.8, 3.7, 0.2, 1.6, 1.1, 213),
    "pepper": (31, 1, 6, 0.3, 2.1, 4.2, 4),
    "peppers": (31, 1, 6, 0.3, 2.1, 4.2, 4),
    "bell pepper": (31, 1, 6, 0.3, 2.1, 4.2, 4),
    "red pepper": (31, 1, 6, 0.3, 2.1, 4.2, 4),
    "green pepper": (20, 0.9, 4.6, 0.2, 1.7, 2.4, 3),
    "yellow pepper": (27, 1, 6.3, 0.2, 0.9, 4.2, 2),
    "chilli": (40, 2, 9, 0.4, 1.5, 5.3, 9),
    "chilli pepper": (40, 2, 9, 0.4, 1.5, 5.3, 9),
    "jalapeno": (29, 0.9, 6.5, 0.4, 2.8, 4.1, 3),
    "cucumber": (16, 0.7, 3.6, 0.1, 0.5, 1.7, 2),
    "courgette": (17, 1.2, 3.1, 0.3, 1, 2.5, 8),
    "zucchini": (17, 1.2, 3.1, 0.3, 1, 2.5, 8),
    "aubergine": (25, 1, 6, 0.2, 3, 3.5, 2),
    "eggplant": (25, 1, 6, 0.2, 3, 3.5, 2),
    "squash": (34, 1.2, 9, 0.1, 1.5, 2.2, 4),
    "butternut squash": (45, 1, 12, 0.1, 2, 2.2, 4),
    "pumpkin": (26, 1, 6.5, 0.1, 0.5, 2.8, 1),
    "marrow": (12, 0.5, 2.3, 0.1, 0.6, 1.4, 3),
    "mushroom": (22, 3.1, 3.3, 0.3, 1, 2, 5),
    "mushrooms": (22, 3.1, 3.3, 0.3, 1, 2, 5),
    "button mushrooms": (22, 3.1, 3.3, 0.3, 1, 2, 5),
    "chestnut mushrooms": (22, 3.1, 3.3, 0.3, 1, 2, 5),
    "portobello mushrooms": (22, 2.1, 3.9, 0.4, 1.3, 2.5, 9),
    "shiitake mushrooms": (34, 2.2, 6.8, 0.5, 2.5, 2.4, 9),
    "oyster mushrooms": (33, 3.3, 6.1, 0.4, 2.3, 1.1, 18),
    "enoki mushrooms": (37, 2.7, 7.8, 0.3, 2.7, 0.2, 3),
    "peas": (81, 5.4, 14, 0.4, 5.1, 5.7, 5),
    "garden peas": (81, 5.4, 14, 0.4, 5.1, 5.7, 5),
    "frozen peas": (77, 5.2, 14, 0.4, 4.5, 4.8, 3),
    "mange tout": (42, 2.8, 7.5, 0.2, 2.6, 4, 4),
    "sugar snap peas": (42, 2.8, 7.5, 0.2, 2.6, 4, 4),
    "green beans": (31, 1.8, 7, 0.1, 3.4, 3.3, 6),
    "french beans": (31, 1.8, 7, 0.1, 3.4, 3.3, 6),
    "runner beans": (22, 1.6, 4, 0.2, 2.5, 1.6, 3),
    "broad beans": (88, 7.9, 11, 0.7, 5.4, 1.8, 25),
    "sweetcorn": (86, 3.3, 19, 1.4, 2.7, 6.3, 15),
    "corn": (86, 3.3, 19, 1.4, 2.7, 6.3, 15),
    "corn on the cob": (86, 3.3, 19, 1.4, 2.7, 6.3, 15),
    "asparagus": (20, 2.2, 3.9, 0.1, 2.1, 1.9, 2),
    "artichoke": (47, 3.3, 11, 0.2, 5.4, 1, 94),
    "globe artichoke": (47, 3.3, 11, 0.2, 5.4, 1, 94),
    "fennel": (31, 1.2, 7.3, 0.2, 3.1, 3.9, 52),
    "pak choi": (13, 1.5, 2.2, 0.2, 1, 1.2, 65),
    "bok choy": (13, 1.5, 2.2, 0.2, 1, 1.2, 65),
    "chinese cabbage": (13, 1.5, 2.2, 0.2, 1, 1.2, 65),
    "bean sprouts": (31, 3, 6, 0.2, 1.8, 4.1, 6),
    "beansprouts": (31, 3, 6, 0.2, 1.8, 4.1, 6),
    "bamboo shoots": (27, 2.6, 5.2, 0.3, 2.2, 3, 4),
    "water chestnuts": (97, 1.4, 24, 0.1, 3, 4.8, 14),
    "avocado": (160, 2, 9, 15, 7, 0.7, 7),
    "olives": (115, 0.8, 6, 11, 3.2, 0, 735),
    "black olives": (115, 0.8, 6, 11, 3.2, 0, 735),
    "green olives": (145, 1, 3.8, 15, 3.3, 0, 1556),
    "capers": (23, 2.4, 5, 0.9, 3.2, 0.4, 2769),
    "gherkins": (14, 0.3, 2.3, 0.2, 1.2, 1.1, 1208),
    "pickles": (14, 0.3, 2.3, 0.2, 1.2, 1.1, 1208),
    "sauerkraut": (19, 0.9, 4.3, 0.1, 2.9, 1.8, 661),
    "kimchi": (15, 1.1, 2.4, 0.5, 1.6, 1.1, 498),
    "seaweed": (35, 1.7, 8, 0.3, 0.5, 0.5, 233),
    "nori": (35, 5.8, 5.1, 0.3, 0.3, 0.5, 48),
    # Legumes & pulses
    "chickpeas": (164, 8.9, 27, 2.6, 7.6, 4.8, 7),
    "canned chickpeas": (139, 7.5, 23, 2.5, 6, 4, 210),
    "lentils": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "red lentils": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "green lentils": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "puy lentils": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "black beans": (132, 8.9, 24, 0.5, 8.7, 0.3, 1),
    "kidney beans": (127, 8.7, 23, 0.5, 6.4, 2.1, 2),
    "red kidney beans": (127, 8.7, 23, 0.5, 6.4, 2.1, 2),
    "cannellini beans": (118, 8.2, 21, 0.5, 6.3, 0.3, 5),
    "white beans": (118, 8.2, 21, 0.5, 6.3, 0.3, 5),
    "butter beans": (115, 7.8, 21, 0.4, 5.8, 0.4, 4),
    "lima beans": (115, 7.8, 21, 0.4, 5.8, 0.4, 4),
    "haricot beans": (118, 8.2, 21, 0.5, 6.3, 0.3, 5),
    "navy beans": (118, 8.2, 21, 0.5, 6.3, 0.3, 5),
    "borlotti beans": (124, 9, 22, 0.5, 5.5, 1.7, 2),
    "pinto beans": (143, 9, 27, 0.7, 9, 0.3, 1),
    "black eyed peas": (116, 7.7, 21, 0.5, 6.5, 3.3, 4),
    "edamame": (121, 11, 9, 5.2, 5.2, 2.2, 6),
    "soybeans": (173, 17, 10, 9, 6, 3, 1),
    "split peas": (118, 8.3, 21, 0.4, 8.3, 2.9, 15),
    "baked beans": (105, 5, 18, 0.5, 5, 6, 530),
    "refried beans": (89, 5.4, 15, 1.2, 5, 0.6, 471),
    "hummus": (166, 7.9, 14, 9.6, 6, 0.3, 379),
    "falafel": (333, 13, 32, 18, 5, 3, 294),
    # Fruits
    "apple": (52, 0.3, 14, 0.2, 2.4, 10, 1),
    "apples": (52, 0.3, 14, 0.2, 2.4, 10, 1),
    "banana": (89, 1.1, 23, 0.3, 2.6, 12, 1),
    "bananas": (89, 1.1, 23, 0.3, 2.6, 12, 1),
    "orange": (47, 0.9, 12, 0.1, 2.4, 9.4, 0),
    "oranges": (47, 0.9, 12, 0.1, 2.4, 9.4, 0),
    "lemon": (29, 1.1, 9.3, 0.3, 2.8, 2.5, 2),
    "lemons": (29, 1.1, 9.3, 0.3, 2.8, 2.5, 2),
    "lemon juice": (22, 0.4, 6.9, 0.2, 0.3, 2.5, 1),
    "lime": (30, 0.7, 11, 0.2, 2.8, 1.7, 2),
    "lime juice": (25, 0.4, 8.4, 0.1, 0.4, 1.7, 2),
    "grapefruit": (42, 0.8, 11, 0.1, 1.6, 7, 0),
    "mandarin": (53, 0.8, 13, 0.3, 1.8, 11, 2),
    "clementine": (47, 0.9, 12, 0.2, 1.7, 9.2, 1),
    "satsuma": (44, 0.6, 11, 0.1, 1.5, 9, 2),
    "grapes": (69, 0.7, 18, 0.2, 0.9, 16, 2),
    "strawberry": (32, 0.7, 7.7, 0.3, 2, 4.9, 1),
    "strawberries": (32, 0.7, 7.7, 0.3, 2, 4.9, 1),
    "raspberry": (52, 1.2, 12, 0.7, 6.5, 4.4, 1),
    "raspberries": (52, 1.2, 12, 0.7, 6.5, 4.4, 1),
    "blueberry": (57, 0.7, 14, 0.3, 2.4, 10, 1),
    "blueberries": (57, 0.7, 14, 0.3, 2.4, 10, 1),
    "blackberry": (43, 1.4, 10, 0.5, 5.3, 4.9, 1),
    "blackberries": (43, 1.4, 10, 0.5, 5.3, 4.9, 1),
    "cherry": (63, 1.1, 16, 0.2, 2.1, 13, 0),
    "cherries": (63, 1.1, 16, 0.2, 2.1, 13, 0),
    "peach": (39, 0.9, 10, 0.3, 1.5, 8.4, 0),
    "nectarine": (44, 1.1, 11, 0.3, 1.7, 7.9, 0),
    "plum": (46, 0.7, 11, 0.3, 1.4, 10, 0),
    "apricot": (48, 1.4, 11, 0.4, 2, 9.2, 1),
    "pear": (57, 0.4, 15, 0.1, 3.1, 10, 1),
    "mango": (60, 0.8, 15, 0.4, 1.6, 14, 1),
    "pineapple": (50, 0.5, 13, 0.1, 1.4, 10, 1),
    "melon": (34, 0.8, 8.2, 0.2, 0.9, 7.9, 16),
    "cantaloupe": (34, 0.8, 8.2, 0.2, 0.9, 7.9, 16),
    "watermelon": (30, 0.6, 8, 0.2, 0.4, 6.2, 1),
    "honeydew": (36, 0.5, 9, 0.1, 0.8, 8, 18),
    "kiwi": (61, 1.1, 15, 0.5, 3, 9, 3),
    "papaya": (43, 0.5, 11, 0.3, 1.7, 8, 8),
    "passion fruit": (97, 2.2, 23, 0.7, 10, 11, 28),
    "pomegranate": (83, 1.7, 19, 1.2, 4, 14, 3),
    "fig": (74, 0.8, 19, 0.3, 2.9, 16, 1),
    "figs": (74, 0.8, 19, 0.3, 2.9, 16, 1),
    "date": (277, 1.8, 75, 0.2, 7, 66, 1),
    "dates": (277, 1.8, 75, 0.2, 7, 66, 1),
    "raisins": (299, 3.1, 79, 0.5, 3.7, 59, 11),
    "sultanas": (299, 2.5, 79, 0.4, 3.7, 59, 11),
    "dried apricots": (241, 3.4, 63, 0.5, 7.3, 53, 10),
    "prunes": (240, 2.2, 64, 0.4, 7.1, 38, 2),
    "cranberries": (46, 0.4, 12, 0.1, 4.6, 4, 2),
    "dried cranberries": (308, 0.1, 83, 1.4, 5.7, 65, 3),
    "coconut": (354, 3.3, 15, 33, 9, 6.2, 20),
    "desiccated coconut": (660, 6, 24, 65, 17, 7, 37),
    # Grains & pasta
    "rice": (130, 2.7, 28, 0.3, 0.4, 0, 1),
    "white rice": (130, 2.7, 28, 0.3, 0.4, 0, 1),
    "brown rice": (112, 2.6, 24, 0.9, 1.8, 0.4, 1),
    "basmati rice": (121, 3.5, 25, 0.4, 0.4, 0, 1),
    "jasmine rice": (130, 2.7, 28, 0.4, 0.6, 0, 0),
    "wild rice": (101, 4, 21, 0.3, 1.8, 0.7, 3),
    "risotto rice": (130, 2.4, 29, 0.2, 0.4, 0, 1),
    "arborio rice": (130, 2.4, 29, 0.2, 0.4, 0, 1),
    "sushi rice": (130, 2.7, 29, 0.3, 0.4, 0, 1),
    "pasta": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "spaghetti": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "penne": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "fusilli": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "tagliatelle": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "lasagne sheets": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "macaroni": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "rigatoni": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "orzo": (131, 5, 25, 1.1, 1.8, 0.6, 1),
    "egg noodles": (138, 4.5, 25, 2.1, 1.2, 0.5, 5),
    "rice noodles": (109, 0.9, 25, 0.2, 0.9, 0, 10),
    "udon noodles": (99, 3, 21, 0.1, 1, 0.5, 380),
    "ramen noodles": (138, 4.5, 26, 2, 1, 0.5, 500),
    "couscous": (112, 3.8, 23, 0.2, 1.4, 0.1, 5),
    "bulgur wheat": (83, 3.1, 19, 0.2, 4.5, 0.1, 5),
    "quinoa": (120, 4.4, 21, 1.9, 2.8, 0.9, 7),
    "barley": (123, 2.3, 28, 0.4, 3.8, 0.3, 3),
    "pearl barley": (123, 2.3, 28, 0.4, 3.8, 0.3, 3),
    "oats": (379, 13.2, 67.7, 6.5, 10.1, 0.9, 6),
    "rolled oats": (379, 13.2, 67.7, 6.5, 10.1, 0.9, 6),
    "porridge oats": (379, 13.2, 67.7, 6.5, 10.1, 0.9, 6),
    "polenta": (70, 1.6, 15, 0.4, 1, 0.1, 1),
    "cornmeal": (361, 8.1, 77, 3.6, 7.3, 0.6, 7),
    "flour": (364, 10, 76, 1, 2.7, 0.3, 2),
    "plain flour": (364, 10, 76, 1, 2.7, 0.3, 2),
    "self-raising flour": (338, 9, 72, 1, 2.4, 0.3, 340),
    "wholemeal flour": (340, 13, 72, 2.5, 11, 0.4, 5),
    "bread": (265, 9, 49, 3.2, 2.7, 5, 491),
    "white bread": (265, 9, 49, 3.2, 2.7, 5, 491),
    "wholemeal bread": (247, 13, 41, 3.4, 7, 4.4, 450),
    "breadcrumbs": (395, 13, 72, 5.3, 4.5, 6.2, 732),
    "panko breadcrumbs": (395, 11, 75, 4, 2.5, 4, 680),
    "tortilla": (237, 6.4, 40, 5.6, 2.8, 1.8, 474),
    "pitta bread": (275, 9, 55, 1.2, 2.2, 1.8, 536),
    "naan bread": (290, 9, 50, 5.5, 2, 3, 520),
    # Nuts & seeds
    "almonds": (579, 21, 22, 50, 12, 4.4, 1),
    "ground almonds": (579, 21, 22, 50, 12, 4.4, 1),
    "flaked almonds": (579, 21, 22, 50, 12, 4.4, 1),
    "walnuts": (654, 15, 14, 65, 6.7, 2.6, 2),
    "cashews": (553, 18, 30, 44, 3.3, 5.9, 12),
    "peanuts": (567, 26, 16, 49, 8.5, 4, 18),
    "hazelnuts": (628, 15, 17, 61, 9.7, 4.3, 0),
    "pistachios": (560, 20, 28, 45, 10, 7.7, 1),
    "pecans": (691, 9.2, 14, 72, 9.6, 4, 0),
    "macadamia nuts": (718, 7.9, 14, 76, 8.6, 4.6, 5),
    "brazil nuts": (656, 14, 12, 66, 7.5, 2.3, 3),
    "pine nuts": (673, 14, 13, 68, 3.7, 3.6, 2),
    "mixed nuts": (607, 20, 21, 54, 7, 4.7, 3),
    "peanut butter": (588, 25, 20, 50, 6, 9.2, 459),
    "almond butter": (614, 21, 19, 56, 10, 4.4, 7),
    "tahini": (595, 17, 21, 54, 9.3, 0.5, 115),
    "sesame seeds": (573, 18, 23, 50, 12, 0.3, 11),
    "sunflower seeds": (584, 21, 20, 51, 8.6, 2.6, 9),
    "pumpkin seeds": (559, 30, 11, 49, 6, 1.4, 7),
    "chia seeds": (486, 17, 42, 31, 34, 0, 16),
    "flaxseeds": (534, 18, 29, 42, 27, 1.6, 30),
    "poppy seeds": (525, 18, 28, 42, 20, 3, 26),
    "hemp seeds": (553, 32, 9, 49, 4, 1.5, 5),
    "chestnuts": (131, 2, 28, 1.4, 3, 11, 2),
    "coconut milk": (197, 2.2, 6, 20, 0, 3.3, 13),
    # Oils & fats
    "olive oil": (884, 0, 0, 100, 0, 0, 2),
    "extra virgin olive oil": (884, 0, 0, 100, 0, 0, 2),
    "vegetable oil": (884, 0, 0, 100, 0, 0, 0),
    "sunflower oil": (884, 0, 0, 100, 0, 0, 0),
    "rapeseed oil": (884, 0, 0, 100, 0, 0, 0),
    "canola oil": (884, 0, 0, 100, 0, 0, 0),
    "coconut oil": (862, 0, 0, 100, 0, 0, 0),
    "sesame oil": (884, 0, 0, 100, 0, 0, 0),
    "groundnut oil": (884, 0, 0, 100, 0, 0, 0),
    "peanut oil": (884, 0, 0, 100, 0, 0, 0),
    "avocado oil": (884, 0, 0, 100, 0, 0, 0),
    "walnut oil": (884, 0, 0, 100, 0, 0, 0),
    "lard": (902, 0, 0, 100, 0, 0, 0),
    "dripping": (891, 0, 0, 99, 0, 0, 0),
    "suet": (854, 0, 0, 94, 0, 0, 7),
    "margarine": (717, 0.2, 0.7, 80, 0, 0, 800),
    "cooking spray": (884, 0, 0, 100, 0, 0, 0),
    "duck fat": (882, 0, 0, 99.8, 0, 0, 0),
    # Herbs & spices
    "salt": (0, 0, 0, 0, 0, 0, 38758),
    "black pepper": (251, 10, 64, 3.3, 25, 0.6, 20),
    "ground pepper": (251, 10, 64, 3.3, 25, 0.6, 20),
    "white pepper": (296, 10, 69, 2.1, 26, 0, 5),
    "paprika": (282, 14, 54, 13, 35, 10, 68),
    "smoked paprika": (282, 14, 54, 13, 35, 10, 68),
    "cumin": (375, 18, 44, 22, 11, 2.3, 168),
    "ground cumin": (375, 18, 44, 22, 11, 2.3, 168),
    "coriander": (23, 2.1, 3.7, 0.5, 2.8, 0.9, 46),
    "ground coriander": (298, 12, 55, 18, 42, 0, 35),
    "coriander seeds": (298, 12, 55, 18, 42, 0, 35),
    "turmeric": (312, 9.7, 67, 3.3, 23, 3.2, 27),
    "ginger": (80, 1.8, 18, 0.8, 2, 1.7, 13),
    "ground ginger": (335, 9, 72, 4.2, 14, 3.4, 27),
    "cinnamon": (247, 4, 81, 1.2, 53, 2.2, 10),
    "ground cinnamon": (247, 4, 81, 1.2, 53, 2.2, 10),
    "nutmeg": (525, 6, 49, 36, 21, 2.9, 16),
    "cloves": (274, 6, 66, 13, 34, 2.4, 277),
    "cardamom": (311, 11, 68, 6.7, 28, 0, 18),
    "star anise": (337, 18, 50, 16, 15, 0, 16),
    "fennel seeds": (345, 16, 52, 15, 40, 0, 88),
    "mustard powder": (469, 24, 34, 29, 13, 8, 12),
    "mustard seeds": (508, 26, 28, 36, 12, 7, 13),
    "cayenne pepper": (318, 12, 57, 17, 27, 10, 30),
    "chilli powder": (282, 14, 50, 14, 35, 8, 1010),
    "chilli flakes": (314, 12, 50, 17, 28, 10, 30),
    "oregano": (265, 9, 69, 4.3, 43, 4.1, 25),
    "dried oregano": (265, 9, 69, 4.3, 43, 4.1, 25),
    "basil": (23, 3.2, 2.7, 0.6, 1.6, 0.3, 4),
    "dried basil": (233, 23, 48, 4, 38, 1.7, 76),
    "thyme": (101, 5.6, 24, 1.7, 14, 0, 9),
    "dried thyme": (276, 9.1, 64, 7.4, 37, 1.7, 55),
    "rosemary": (131, 3.3, 21, 5.9, 14, 0, 26),
    "dried rosemary": (331, 4.9, 64, 15, 43, 0, 50),
    "mint": (44, 3.3, 8.4, 0.7, 6.8, 0, 30),
    "dried mint": (285, 20, 53, 6, 30, 0, 344),
    "parsley": (36, 3, 6.3, 0.8, 3.3, 0.9, 56),
    "dried parsley": (292, 27, 51, 5.5, 27, 7.3, 452),
    "bay leaves": (313, 8, 75, 8, 26, 0, 23),
    "sage": (315, 11, 61, 13, 40, 1.7, 11),
    "dill": (43, 3.5, 7, 1.1, 2.1, 0, 61),
    "chives": (30, 3.3, 4.4, 0.7, 2.5, 1.9, 3),
    "tarragon": (295, 23, 50, 7.2, 7.4, 0, 62),
    "curry powder": (325, 13, 56, 14, 35, 2.8, 52),
    "garam masala": (379, 15, 45, 15, 25, 3, 56),
    "mixed herbs": (250, 10, 55, 5, 30, 3, 40),
    "italian seasoning": (250, 10, 55, 5, 30, 3, 40),
    "chinese five spice": (340, 12, 58, 12, 20, 3, 20),
    "vanilla extract": (288, 0.1, 13, 0.1, 0, 13, 9),
    "vanilla pod": (288, 0.1, 13, 0.1, 0, 13, 9),
    "saffron": (310, 11, 65, 6, 4, 0, 148),
    # Sauces & condiments
    "soy sauce": (53, 8, 5, 0, 0.8, 0.4, 5493),
    "dark soy sauce": (60, 6, 9, 0, 0, 6, 5600),
    "light soy sauce": (41, 6, 4.1, 0, 0, 0, 5500),
    "worcestershire sauce": (78, 0, 19, 0, 0, 11, 980),
    "tomato ketchup": (112, 1.7, 28, 0.1, 0.3, 22, 907),
    "tomato puree": (82, 4.3, 19, 0.5, 4.1, 12, 77),
    "tomato paste": (82, 4.3, 19, 0.5, 4.1, 12, 77),
    "passata": (24, 1.3, 4.6, 0.1, 1.5, 3.6, 10),
    "chopped tomatoes": (18, 0.9, 3.5, 0.1, 0.9, 2.6, 9),
    "tinned tomatoes": (18, 0.9, 3.5, 0.1, 0.9, 2.6, 9),
    "mustard": (66, 4.4, 6, 3.3, 3.3, 3, 1135),
    "english mustard": (151, 9, 7, 10, 3, 3, 1000),
    "dijon mustard": (66, 4.1, 6, 3.3, 2, 3, 1135),
    "wholegrain mustard": (149, 8, 10, 10, 5, 4, 1160),
    "horseradish": (48, 1.2, 11, 0.7, 3.3, 8, 420),
    "vinegar": (21, 0, 0.9, 0, 0, 0.4, 8),
    "balsamic vinegar": (88, 0.5, 17, 0, 0, 15, 23),
    "red wine vinegar": (19, 0, 0.3, 0, 0, 0, 8),
    "white wine vinegar": (21, 0, 0.9, 0, 0, 0.4, 8),
    "apple cider vinegar": (21, 0, 0.9, 0, 0, 0.4, 5),
    "mirin": (241, 0.2, 43, 0, 0, 32, 15),
    "rice vinegar": (18, 0, 0, 0, 0, 0, 0),
    "hot sauce": (11, 0.5, 2, 0.4, 0.5, 1, 2643),
    "sriracha": (93, 2, 19, 1, 2, 15, 2200),
    "bbq sauce": (172, 0.8, 41, 0.6, 0.6, 33, 1027),
    "teriyaki sauce": (89, 6, 16, 0, 0.1, 14, 3833),
    "oyster sauce": (51, 1, 11, 0.3, 0, 4, 2733),
    "hoisin sauce": (220, 3.4, 44, 3.4, 2, 31, 1396),
    "pesto": (387, 5.3, 6, 37, 2.3, 2, 900),
    "honey": (304, 0.3, 82, 0, 0.2, 82, 4),
    "maple syrup": (260, 0, 67, 0.1, 0, 60, 12),
    "golden syrup": (325, 0, 79, 0, 0, 73, 270),
    "treacle": (290, 1.6, 74, 0, 0, 62, 96),
    "stock cube": (229, 14, 19, 11, 0.5, 6, 16000),
    "vegetable stock": (8, 0.3, 1.5, 0.1, 0, 0.5, 300),
    # Pantry staples
    "prawn": (99, 24, 0.2, 0.3, 0, 0, 111),
    "cherry tomato": (18, 0.9, 3.9, 0.2, 1.2, 2.6, 5),
    "pea": (81, 5.4, 14, 0.4, 5.7, 5.7, 5),
    "chickpea": (164, 8.9, 27, 2.6, 7.6, 4.8, 7),
    "lentil": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "red lentil": (116, 9, 20, 0.4, 7.9, 1.8, 2),
    "kidney bean": (127, 8.7, 23, 0.5, 6.4, 0.3, 2),
    "tofu": (76, 8, 1.9, 4.8, 0.3, 0.6, 7),
    "porridge oat": (379, 13.2, 67.7, 6.5, 10.1, 0.9, 6),
    "sugar": (387, 0, 100, 0, 0, 100, 1),
    "caster sugar": (387, 0, 100, 0, 0, 100, 1),
    "almond": (579, 21, 22, 50, 12, 4.4, 1),
    "ketchup": (112, 1.7, 28, 0.1, 0.3, 22, 907),
    "water": (0, 0, 0, 0, 0, 0, 0),
}
