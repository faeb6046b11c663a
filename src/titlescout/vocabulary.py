"""Static word tables used to classify product title words."""

from __future__ import annotations

from types import MappingProxyType

# Marketing adjectives that never help a marketplace search.
MARKETING_WORDS = frozenset(
    {
        "new", "best", "hot", "premium", "professional", "advanced",
        "super", "ultra", "mega", "pro", "deluxe", "luxury", "high",
        "quality", "top", "leading", "famous", "popular", "trending",
        "amazing", "incredible", "fantastic", "excellent", "perfect",
        "great", "good", "nice", "beautiful", "stylish", "modern",
        "classic", "traditional", "vintage", "antique", "unique",
        "special", "exclusive", "limited", "edition", "version",
    }
)

# Nouns naming a general product class. Attribute words (smart, gaming,
# wireless, women, ...) are kept out so a modifier never wins over the noun.
CATEGORY_WORDS = frozenset(
    {
        # electronics
        "camera", "phone", "laptop", "headphones", "speaker", "tablet",
        "watch", "tv", "monitor", "keyboard", "mouse", "printer", "scanner",
        "router", "modem", "cable", "charger", "battery", "adapter",
        "power", "usb", "hdmi",
        # clothing
        "dress", "shirt", "t-shirt", "pants", "jacket", "coat", "sweater",
        "jeans", "skirt", "blouse", "hoodie", "socks", "underwear", "bra",
        "pajamas", "robe", "bathrobe",
        # footwear
        "shoes", "sneakers", "boots", "sandals", "heels", "flats",
        "loafers", "slippers",
        # accessories
        "bag", "backpack", "purse", "wallet", "belt", "scarf", "hat",
        "gloves",
        # home
        "towel", "bedding", "pillow", "blanket", "curtain", "rug", "lamp",
        "chair", "table", "desk", "bed", "sofa", "couch",
        # vehicles
        "car", "bike", "motorcycle", "truck", "van", "suv", "sedan",
        "hatchback", "convertible",
        # pets
        "pet", "dog", "cat", "bird", "fish",
    }
)

# Descriptive attributes: capabilities, build, materials and finishes.
FEATURE_WORDS = frozenset(
    {
        # camera and video
        "panoramic", "360", "night", "vision", "security", "surveillance",
        "motion", "detection", "recording", "playback", "streaming", "live",
        "remote", "zoom", "optical", "autofocus", "focus", "aperture",
        "shutter", "iso", "exposure", "flash", "stabilization",
        # connectivity and power
        "access", "mobile", "app", "cloud", "storage", "sd", "card",
        "memory", "battery", "powered", "solar", "wired", "wireless",
        "bluetooth", "wifi", "cellular", "4g", "5g", "lte", "gps",
        # display
        "touch", "screen", "display", "oled", "lcd", "led", "retina", "hd",
        "4k", "8k", "ultra", "high", "definition", "resolution", "pixel",
        "megapixel", "digital", "manual", "speed", "white", "balance",
        # build
        "waterproof", "water", "resistant", "dust", "proof", "shock",
        "impact", "rugged", "durable", "lightweight", "compact", "portable",
        "foldable", "collapsible", "adjustable", "ergonomic", "comfortable",
        # fabric care
        "breathable", "moisture", "wicking", "quick", "dry", "stain",
        "wrinkle", "machine", "washable", "wash", "steam", "bleach",
        "fragrance", "hypoallergenic", "hand", "clean", "low", "heat",
        "free", "only",
        # materials
        "organic", "natural", "synthetic", "cotton", "polyester", "nylon",
        "spandex", "elastane", "wool", "silk", "leather", "suede", "canvas",
        "denim", "linen", "cashmere", "angora", "mohair", "alpaca",
        "merino", "pima", "egyptian", "bamboo", "hemp", "jute", "sisal",
        "cork", "wood", "metal", "plastic", "glass", "ceramic", "stone",
        "marble", "granite", "quartz", "crystal", "diamond", "gold",
        "silver", "platinum", "titanium", "stainless", "steel", "aluminum",
        "copper", "brass", "bronze", "chrome", "nickel", "zinc", "iron",
        "carbon", "rubber", "silicone", "teflon", "vinyl", "acrylic",
        "epoxy", "urethane", "polymer", "rhodium", "palladium", "nitride",
        # construction and finish
        "cast", "wrought", "forged", "milled", "machined", "welded",
        "soldered", "brazed", "riveted", "screwed", "bolted", "glued",
        "adhered", "bonded", "sewn", "stitched", "embroidered", "printed",
        "painted", "coated", "plated", "anodized", "powder", "galvanized",
        "stick", "reflective", "glare", "scratch", "fingerprint",
        "bacterial", "microbial", "fungal", "viral", "odor", "static", "uv",
        "radiation", "magnetic", "corrosive", "rust", "oxidation", "aging",
        "non", "anti", "like",
    }
)

# Surface word -> canonical product type.
PRODUCT_TYPES = MappingProxyType(
    {
        "camera": "camera",
        "smartphone": "phone",
        "phone": "phone",
        "cell": "phone",
        "laptop": "laptop",
        "computer": "laptop",
        "notebook": "laptop",
        "headphones": "headphones",
        "earbuds": "headphones",
        "earphones": "headphones",
        "headset": "headphones",
        "speaker": "speaker",
        "tablet": "tablet",
        "ipad": "tablet",
        "watch": "watch",
        "smartwatch": "watch",
        "shoes": "shoes",
        "sneakers": "shoes",
        "boots": "shoes",
        "sandals": "shoes",
        "heels": "shoes",
        "flats": "shoes",
        "loafers": "shoes",
        "slippers": "shoes",
        "dress": "dress",
        "shirt": "shirt",
        "t-shirt": "shirt",
        "blouse": "shirt",
        "pants": "pants",
        "jeans": "pants",
        "jacket": "jacket",
        "coat": "jacket",
        "sweater": "sweater",
        "hoodie": "sweater",
        "skirt": "skirt",
        "bag": "bag",
        "backpack": "bag",
        "purse": "bag",
        "handbag": "bag",
        "tote": "bag",
        "wallet": "wallet",
        "belt": "belt",
        "scarf": "scarf",
        "hat": "hat",
        "cap": "hat",
        "beanie": "hat",
        "gloves": "gloves",
        "socks": "socks",
        "underwear": "underwear",
        "bra": "bra",
        "pajamas": "pajamas",
        "robe": "robe",
        "bathrobe": "robe",
        "towel": "towel",
        "bedding": "bedding",
        "pillow": "pillow",
        "blanket": "blanket",
        "curtain": "curtain",
        "rug": "rug",
        "carpet": "rug",
        "lamp": "lamp",
        "light": "lamp",
        "chair": "chair",
        "table": "table",
        "desk": "desk",
        "bed": "bed",
        "sofa": "sofa",
        "couch": "sofa",
        "tv": "tv",
        "television": "tv",
        "monitor": "monitor",
        "keyboard": "keyboard",
        "mouse": "mouse",
        "printer": "printer",
        "scanner": "scanner",
        "router": "router",
        "modem": "modem",
        "cable": "cable",
        "charger": "charger",
        "battery": "battery",
        "adapter": "adapter",
        "power": "power",
        "usb": "usb",
        "hdmi": "hdmi",
        "car": "car",
        "bike": "bike",
        "bicycle": "bike",
        "motorcycle": "bike",
        "truck": "truck",
        "van": "van",
        "suv": "suv",
        "sedan": "sedan",
        "hatchback": "hatchback",
        "convertible": "convertible",
        "pet": "pet",
        "dog": "pet",
        "cat": "pet",
        "bird": "pet",
        "fish": "pet",
    }
)
