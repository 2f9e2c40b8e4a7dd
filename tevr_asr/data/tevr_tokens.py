"""Token table of the German TEVR acoustic model.

Ids 0, 1 and 2 are blank, end-of-sequence and word-space; the end-of-sequence
surface is a space so that finalization closes the trailing word.
"""

TEVR_TOKENS: list[str] = [
    "", " ", " ", "chen", "sche", "lich", "isch", "icht", "iche", "eine", "rden",
    "tion", "urde", "haft", "eich", "rung", "chte", "ssen", "chaf", "nder", "tlic",
    "tung", "eite", "iert", "sich", "ngen", "erde", "scha", "nden", "unge", "lung",
    "mmen", "eren", "ende", "inde", "erun", "sten", "iese", "igen", "erte", "iner",
    "tsch", "keit", "der", "die", "ter", "und", "ein", "ist", "den", "ten", "ber",
    "ver", "sch", "ung", "ste", "ent", "ach", "nte", "auf", "ben", "eit", "des", "ers",
    "aus", "das", "von", "ren", "gen", "nen", "lle", "hre", "mit", "iel", "uch", "lte",
    "ann", "lie", "men", "dem", "and", "ind", "als", "sta", "elt", "ges", "tte", "ern",
    "wir", "ell", "war", "ere", "rch", "abe", "len", "ige", "ied", "ger", "nnt", "wei",
    "ele", "och", "sse", "end", "all", "ahr", "bei", "sie", "ede", "ion", "ieg", "ege",
    "auc", "che", "rie", "eis", "vor", "her", "ang", "f\u00fcr", "ass", "uss", "tel",
    "er", "in", "ge", "en", "st", "ie", "an", "te", "be", "re", "zu", "ar", "es", "ra",
    "al", "or", "ch", "et", "ei", "un", "le", "rt", "se", "is", "ha", "we", "at", "me",
    "ne", "ur", "he", "au", "ro", "ti", "li", "ri", "eh", "im", "ma", "tr", "ig", "el",
    "um", "la", "am", "de", "so", "ol", "tz", "il", "on", "it", "sc", "sp", "ko", "na",
    "pr", "ni", "si", "fe", "wi", "ns", "ke", "ut", "da", "gr", "eu", "mi", "hr", "ze",
    "hi", "ta", "ss", "ng", "sa", "us", "ba", "ck", "em", "kt", "ka", "ve", "fr", "bi",
    "wa", "ah", "gt", "di", "ab", "fo", "to", "rk", "as", "ag", "gi", "hn", "s", "t",
    "n", "m", "r", "l", "f", "e", "a", "b", "d", "h", "k", "g", "o", "i", "u", "w",
    "p", "z", "\u00e4", "\u00fc", "v", "\u00f6", "j", "c", "y", "x", "q", "\u00e1",
    "\u00ed", "\u014d", "\u00f3", "\u0161", "\u00e9", "\u010d", "?",
]
