from pathlib import Path

# Default location for everything the tracker persists (checklists, pinned lists).
DATA_DIR = Path(__file__).resolve().parents[2] / "data"
CHECKLIST_FOLDER_NAME = "checklists"
CHECKLIST_FILE_PATTERN = "checklist_{version}.txt"
PINNED_FILE_NAME = "pinned_objectives.json"

# Criteria sets without an explicit goal label use this one.
DEFAULT_GOAL = "Completed"

# Top-level advancement tabs whose "<namespace>:<section>/root" entry is derived
# from its children while the manual checklist is in use.
ROOT_NAMESPACE = "minecraft"
ROOT_SECTIONS = ("story", "nether", "end", "husbandry", "adventure")
ROOT_SUFFIX = "/root"

# Hover outline drawn around the hovered checkable item, in layout units.
HIGHLIGHT_INFLATE = 3.0

# Category display names.
CATEGORY_ALL_ADVANCEMENTS = "All Advancements"
CATEGORY_ALL_BLOCKS = "All Blocks"
CATEGORY_ALL_ACHIEVEMENTS = "All Achievements"

DEFAULT_CATEGORY = CATEGORY_ALL_ADVANCEMENTS
DEFAULT_VERSION = "1.21"

# First revision suffix probed when resolving pinned-list keys ("... v2").
FIRST_PINNED_REVISION = 2

# Pinnable objective short-names available per category kind, before version gating.
PINNABLE_ALL_ADVANCEMENTS = (
    "EGap", "Trident", "NautilusShells", "WitherSkulls",
    "AncientDebris", "GoldBlocks", "Bees", "Sniffers",
    "Cats", "Foods", "Animals", "Monsters", "Biomes", "Cauldrons", "ArmorTrims", "HeavyCore",
)

PINNABLE_ALL_BLOCKS = (
    "Trident", "NautilusShells", "ShulkerShells", "WitherSkulls",
    "AncientDebris", "DeepslateEmerald", "SculkBlocks", "Mycelium", "RedSand", "Bees", "HeavyCore",
)

PINNABLE_ALL_ACHIEVEMENTS = (
    "EGap", "WitherSkulls", "GoldBlocks", "Biomes",
)

# Shipped pinned lists. A "vN" suffix marks a newer revision of the same default.
DEFAULT_PINNED = {
    "All Advancements 1.21.6": [
        "WitherSkulls", "NautilusShells", "Trident", "HeavyCore", "Sniffers", "ArmorTrims",
    ],
    "All Advancements 1.21 v2": [
        "WitherSkulls", "NautilusShells", "Trident", "HeavyCore", "Sniffers", "ArmorTrims",
    ],
    "All Advancements 1.21": [
        "WitherSkulls", "NautilusShells", "Trident", "Sniffers", "ArmorTrims",
    ],
    "All Advancements 1.20.5": [
        "WitherSkulls", "NautilusShells", "Trident", "Sniffers", "ArmorTrims",
    ],
    "All Advancements 1.20 v2": [
        "WitherSkulls", "NautilusShells", "Trident", "Sniffers", "ArmorTrims",
    ],
    "All Advancements 1.20": [
        "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap", "ArmorTrims",
    ],
    "All Advancements 1.19": [
        "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.18": [
        "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.17": [
        "Cauldrons", "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.16.5": [
        "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.16": [
        "AncientDebris", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.15": [
        "GoldBlocks", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.14": [
        "Cats", "GoldBlocks", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.13": [
        "GoldBlocks", "WitherSkulls", "NautilusShells", "Trident", "EGap",
    ],
    "All Advancements 1.12": [
        "GoldBlocks", "WitherSkulls", "Monsters", "Biomes", "EGap",
    ],
    "All Achievements 1.11": [
        "GoldBlocks", "WitherSkulls", "Biomes", "EGap",
    ],
    "All Blocks 1.21": [
        "DeepslateEmerald", "HeavyCore", "WitherSkulls", "ShulkerShells", "NautilusShells", "Trident",
    ],
    "All Blocks 1.20": [
        "AncientDebris", "DeepslateEmerald", "WitherSkulls", "ShulkerShells", "NautilusShells", "Trident",
    ],
    "All Blocks 1.19": [
        "AncientDebris", "DeepslateEmerald", "WitherSkulls", "ShulkerShells", "NautilusShells", "Trident",
    ],
    "All Blocks 1.18": [
        "AncientDebris", "DeepslateEmerald", "WitherSkulls", "ShulkerShells", "NautilusShells", "Trident",
    ],
    "All Blocks 1.16": [
        "AncientDebris", "Mycelium", "WitherSkulls", "ShulkerShells", "NautilusShells", "Trident",
    ],
}
