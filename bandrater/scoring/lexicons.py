"""Curated word lists used by the band name heuristics.

All lists are immutable and built once at import time. They are
intentionally narrow: the personal-name lists favour precision on common
English-language names over recall.
"""

# =============================================================================
# PERSONAL NAMES
# =============================================================================

# Band-ish nouns that must never be mistaken for a first name or surname
GENERIC_NOUN_HINTS: frozenset[str] = frozenset({
    "band", "project", "group", "crew", "club", "boys", "girls", "giant", "giants",
    "monkeys", "fighters", "man", "men", "wizards", "wizard", "lizard", "dragons",
    "vampires", "unicorns", "blood", "wolves", "angels", "royal", "arctic", "radio",
    "police", "beatles", "stones", "doors", "stripes",
})

FIRST_NAMES: frozenset[str] = frozenset({
    "ed", "paul", "john", "george", "ringo", "james", "michael", "david", "robert",
    "richard", "charles", "william", "thomas", "daniel", "andrew", "mark", "anthony",
    "brian", "kevin", "steven", "tim", "jack", "liam", "noah", "henry", "sam", "samuel",
    "luke", "harry", "lewis", "alex", "alexander", "nathan", "scott", "bruno", "chris",
    "christopher", "tyler", "chance", "taylor", "adele", "beyonce", "lana", "billie",
    "olivia", "emma", "sarah", "sara", "anna", "bella", "kate", "katie", "amy", "mary",
    "jane", "emily", "ella", "megan", "ariana", "selena", "kylie",
    "mariah", "jacob", "amanda", "rae", "manny", "carrie", "jacqueline", "jac", "saif",
    "mitch", "dani",
})

COMMON_SURNAMES: frozenset[str] = frozenset({
    "sheeran", "mccartney", "lennon", "harrison", "starr", "presley", "cash", "hendrix",
    "cobain", "morrison", "springsteen", "grohl", "yorke", "greenwood", "osbourne", "osborne",
    "gallagher", "turner", "flowers", "styles", "swift", "smith", "johnson", "williams",
    "brown", "jones", "miller", "davis", "garcia", "rodriguez", "martinez", "wilson",
    "anderson", "thomas", "moore", "jackson", "martin", "lee", "thompson", "white", "harris",
    "sanchez", "clark", "lewis", "robinson", "walker", "young", "allen", "king", "wright",
    "scott", "torres", "nguyen", "hill", "flores", "green", "adams", "nelson", "baker", "hall",
    "rivera", "campbell", "mitchell", "carter", "roberts", "mars", "delrey", "knowles",
    "grande", "lovato", "bieber", "eilish", "daniels",
    "carey", "dinardo", "henson", "fair", "mullin", "mikaelson", "gunther", "sharayah", "sakach",
})

# Checked after normalisation, so "O'Connor" arrives as "oconnor"
SURNAME_PREFIXES: tuple[str, ...] = (
    "mc", "mac", "o", "van", "von", "de", "del", "di", "da", "du", "la", "le",
    "st", "saint", "bin", "ibn", "al",
)

SURNAME_SUFFIXES: tuple[str, ...] = (
    "son", "sen", "ez", "es", "er", "man", "mann", "ton", "ford", "field", "ham", "wood",
    "well", "worth", "stone", "ston", "berg", "stein", "ski", "sky", "ov", "ova", "ev",
    "eva", "ich", "vich", "vic", "off", "eff", "ano", "ini", "tti", "ney", "cartney",
    "connor", "brien", "reilly", "donald", "cain", "aine", "mars", "ley",
)

# =============================================================================
# DESCRIPTORS AND ROLES
# =============================================================================

DESCRIPTOR_WORDS: tuple[str, ...] = (
    "band", "project", "experience", "orchestra", "quartet", "quintet", "trio",
    "ensemble", "collective", "group", "feat", "featuring", "with", "dj", "mc",
)

GENERIC_ROLES: frozenset[str] = frozenset({
    "rapper", "singer", "artist", "producer", "dj", "mc", "band", "group", "man", "woman",
    "boy", "girl", "duo", "trio", "quartet", "collective", "project", "crew", "gang",
    "musician", "player", "performer", "composer", "poet", "actor", "actress",
})

CREATIVE_ROLES: frozenset[str] = frozenset({
    "creator", "architect", "alchemist", "visionary", "inventor", "engineer", "scientist",
    "philosopher", "prophet", "cartographer", "navigator", "magician", "wizard", "author",
    "director", "designer", "artisan", "maker", "builder",
})

AGENTIVE_SUFFIXES: tuple[str, ...] = (
    "or", "ist", "ian", "eer", "eur", "wright", "smith", "maker", "mancer",
)

# =============================================================================
# PENALTY LISTS
# =============================================================================

JUVENILE_WORDS: tuple[str, ...] = (
    "taco", "unicorn", "guacamole", "platypus", "pickle", "pudding", "poop", "fart",
    "cheetos", "yolo", "narwhal", "rainbow", "waffle", "nugget", "slime", "derp",
)

ODD_PHRASES: frozenset[str] = frozenset({
    "maroon 5",
    "the black eyed peas",
    "black eyed peas",
    "coldplay",
})

# Colours that make a "colour + number" name feel odd
NONSENSE_COLORS: frozenset[str] = frozenset({
    "black", "white", "red", "blue", "green", "yellow", "purple", "pink", "orange",
    "maroon", "teal", "indigo", "violet", "silver", "gold",
})

COMPOUND_PREFIXES: tuple[str, ...] = ("cold", "blue", "black", "white", "red", "green", "pink")
COMPOUND_SUFFIXES: tuple[str, ...] = ("play", "work", "sound", "music", "thing", "stuff")

# =============================================================================
# STYLE VOCABULARY
# =============================================================================

STYLE_COLORS: frozenset[str] = frozenset({
    "black", "pink", "red", "blue", "green", "white", "gold", "silver",
})

DARK_WORDS: tuple[str, ...] = (
    "black", "doom", "blood", "void", "skull", "wrath", "masto", "mastodon",
)

HIP_HOP_PREFIXES: tuple[str, ...] = ("lil", "big", "yung", "young", "da", "tha")

SYNTH_WORDS: tuple[str, ...] = (
    "808", "909", "synth", "mono", "stereo", "electro", "wave", "bass",
)

RURAL_WORDS: tuple[str, ...] = (
    "ridge", "creek", "hollow", "county", "road", "river", "prairie", "barn",
)

# =============================================================================
# PHONETIC CHARACTER CLASSES
# =============================================================================

VOWELS = "aeiouy"
HARSH_CHARS = "kstzxgrd"  # stops, sibilants, rolled sounds
SOFT_CHARS = "mnlwuvbpfh"  # nasals, liquids, rounded sounds
TECH_CHARS = "tkpqxz"

# Easter egg: always scores a perfect 10
PERFECT_NAME = "she likes cloth"
