"""
Built-in word list for passphrase generation, plus a loader for
newline-delimited word list files.

The built-in list holds 256 unique lowercase English words, so every word
carries exactly 8 bits and indices need no modulo reduction.
"""

from __future__ import annotations

from pathlib import Path

from .errors import WordListError


def load_word_list(path: str | Path) -> list[str]:
    """
    Read a UTF-8 word list with one word per line.

    Surrounding whitespace is stripped and blank lines are skipped.
    Duplicates are kept; they are dropped when the universe is built.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise WordListError(f"word list {str(path)!r} is not valid UTF-8: {exc.reason}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


WORD_LIST_DEFAULT = (
    "acid", "acorn", "actor", "adobe", "agent", "alarm", "album", "alley",
    "amber", "amend", "angle", "ankle", "anvil", "apple", "apron", "arena",
    "armor", "arrow", "aspen", "atlas", "attic", "audio", "autumn", "avenue",
    "badge", "bagel", "baker", "bamboo", "banjo", "barn", "basil", "basin",
    "batch", "beach", "beacon", "beard", "beaver", "bench", "berry", "bison",
    "blade", "blanket", "blaze", "bloom", "board", "bonus", "boots", "bottle",
    "bounty", "brick", "bridge", "brook", "broom", "bucket", "buffalo", "bugle",
    "bundle", "cabin", "cactus", "camel", "candle", "canoe", "canyon", "carbon",
    "cargo", "carpet", "castle", "cedar", "cellar", "chalk", "charm", "cheese",
    "cherry", "chess", "chimney", "cider", "cinema", "circus", "citrus", "clay",
    "cliff", "clock", "cloud", "clover", "cobalt", "cocoa", "comet", "compass",
    "copper", "coral", "cotton", "cougar", "crane", "crater", "crayon", "creek",
    "cricket", "crown", "crystal", "cushion", "daisy", "dance", "delta", "denim",
    "desert", "diary", "dinner", "dolphin", "donkey", "dragon", "drawer", "dream",
    "drum", "eagle", "easel", "echo", "eclipse", "elbow", "ember", "engine",
    "falcon", "fable", "fern", "ferry", "fiddle", "field", "finch", "flame",
    "flannel", "flute", "forest", "fossil", "fountain", "fox", "garden", "garlic",
    "gecko", "geyser", "ginger", "glacier", "globe", "goblet", "gopher", "granite",
    "grape", "gravel", "guitar", "hammer", "harbor", "harvest", "hazel", "helmet",
    "heron", "hiker", "hockey", "honey", "horizon", "hornet", "igloo", "indigo",
    "island", "ivory", "jacket", "jaguar", "jasmine", "jelly", "jester", "jigsaw",
    "jungle", "kayak", "kernel", "kettle", "kitten", "koala", "ladder", "lagoon",
    "lantern", "lemon", "lentil", "lily", "linen", "lizard", "lobster", "locket",
    "lotus", "magnet", "mango", "maple", "marble", "meadow", "melon", "meteor",
    "mitten", "monsoon", "mosaic", "muffin", "mustard", "napkin", "nectar", "needle",
    "nickel", "noodle", "nutmeg", "oasis", "ocean", "olive", "onion", "orbit",
    "orchid", "otter", "oyster", "paddle", "panda", "parrot", "pasta", "peach",
    "pebble", "pencil", "pepper", "piano", "pickle", "pilot", "pine", "planet",
    "plaza", "pocket", "pony", "potato", "prairie", "puzzle", "quail", "quartz",
    "quill", "rabbit", "radar", "radish", "raven", "reef", "ribbon", "river",
    "robin", "rocket", "saddle", "salmon", "sandal", "satin", "scarf", "sequoia",
    "shovel", "silver", "sketch", "sled", "sparrow", "spider", "sponge", "spruce",
)
