"""Static glyph tables of the builtin single-byte encodings.

Each row is ``(character, glyph name, code)``. WinAnsiEncoding is not listed
here: it is derived from the cp1252 codec in :mod:`simple_pdf.encoding`.
"""

MAC_ROMAN_GLYPHS = (
    ("Æ", "AE", 0o256),
    ("Á", "Aacute", 0o347),
    ("Â", "Acircumflex", 0o345),
    ("Ä", "Adieresis", 0o200),
    ("À", "Agrave", 0o313),
    ("Å", "Aring", 0o201),
    ("Ã", "Atilde", 0o314),
    ("Ç", "Ccedilla", 0o202),
    ("É", "Eacute", 0o203),
    ("Ê", "Ecircumflex", 0o346),
    ("Ë", "Edieresis", 0o350),
    ("È", "Egrave", 0o351),
    ("€", "Euro", 0o333),
    ("Í", "Iacute", 0o352),
    ("Î", "Icircumflex", 0o353),
    ("Ï", "Idieresis", 0o354),
    ("Ì", "Igrave", 0o355),
    ("Ñ", "Ntilde", 0o204),
    ("Œ", "OE", 0o316),
    ("Ó", "Oacute", 0o356),
    ("Ô", "Ocircumflex", 0o357),
    ("Ö", "Odieresis", 0o205),
    ("Ò", "Ograve", 0o361),
    ("Ø", "Oslash", 0o257),
    ("Õ", "Otilde", 0o315),
    ("Ú", "Uacute", 0o362),
    ("Û", "Ucircumflex", 0o363),
    ("Ü", "Udieresis", 0o206),
    ("Ù", "Ugrave", 0o364),
    ("Ÿ", "Ydieresis", 0o331),
    ("á", "aacute", 0o207),
    ("â", "acircumflex", 0o211),
    ("´", "acute", 0o253),
    ("ä", "adieresis", 0o212),
    ("æ", "ae", 0o276),
    ("à", "agrave", 0o210),
    ("å", "aring", 0o214),
    ("ã", "atilde", 0o213),
    ("˘", "breve", 0o371),
    ("•", "bullet", 0o245),
    ("ˇ", "caron", 0o377),
    ("ç", "ccedilla", 0o215),
    ("¸", "cedilla", 0o374),
    ("ˆ", "circumflex", 0o366),
    ("©", "copyright", 0o251),
    ("†", "dagger", 0o240),
    ("‡", "daggerdbl", 0o340),
    ("°", "degree", 0o241),
    ("¨", "dieresis", 0o254),
    ("÷", "divide", 0o326),
    ("˙", "dotaccent", 0o307),
    ("é", "eacute", 0o216),
    ("ê", "ecircumflex", 0o220),
    ("ë", "edieresis", 0o221),
    ("è", "egrave", 0o217),
    ("…", "ellipsis", 0o311),
    ("—", "emdash", 0o321),
    ("–", "endash", 0o320),
    ("¡", "exclamdown", 0o301),
    ("ﬁ", "fi", 0o336),
    ("ﬂ", "fl", 0o337),
    ("ƒ", "florin", 0o304),
    ("⁄", "fraction", 0o332),
    ("∕", "fraction", 0o332),
    ("ß", "germandbls", 0o247),
    ("`", "grave", 0o140),
    ("«", "guillemotleft", 0o307),
    ("»", "guillemotright", 0o310),
    ("‹", "guilsinglleft", 0o334),
    ("›", "guilsinglright", 0o335),
    ("˝", "hungarumlaut", 0o375),
    ("í", "iacute", 0o222),
    ("î", "icircumflex", 0o224),
    ("ï", "idieresis", 0o225),
    ("ì", "igrave", 0o223),
    ("¬", "logicalnot", 0o302),
    ("¯", "macron", 0o370),
    ("ˉ", "macron", 0o370),
    ("µ", "mu", 0o265),
    ("ñ", "ntilde", 0o226),
    ("ó", "oacute", 0o227),
    ("ô", "ocircumflex", 0o231),
    ("ö", "odieresis", 0o232),
    ("œ", "oe", 0o317),
    ("˛", "ogonek", 0o376),
    ("ò", "ograve", 0o230),
    ("ª", "ordfeminine", 0o273),
    ("º", "ordmasculine", 0o274),
    ("ø", "oslash", 0o277),
    ("õ", "otilde", 0o233),
    ("·", "periodcentered", 0o341),
    ("∙", "periodcentered", 0o341),
    ("‰", "perthousand", 0o344),
    ("±", "plusminus", 0o261),
    ("¿", "questiondown", 0o300),
    ("„", "quotedblbase", 0o343),
    ("“", "quotedblleft", 0o322),
    ("”", "quotedblright", 0o323),
    ("‘", "quoteleft", 0o324),
    ("’", "quoteright", 0o325),
    ("‚", "quotesinglebase", 0o342),
    ("'", "quotesingle", 0o047),
    ("®", "registered", 0o250),
    ("˚", "ring", 0o373),
    ("§", "section", 0o244),
    ("˜", "tilde", 0o367),
    ("™", "trademark", 0o252),
    ("ú", "uacute", 0o234),
    ("û", "ucircumflex", 0o236),
    ("ü", "udieresis", 0o237),
    ("ù", "ugrave", 0o235),
    ("ÿ", "ydieres", 0o330),
    ("¥", "yen", 0o264),
)

SYMBOL_GLYPHS = (
    (" ", "space", 0o40),
    ("\u00a0", "space", 0o40),
    ("!", "exclam", 0o41),
    ("∀", "universal", 0o42),
    ("#", "numbersign", 0o43),
    ("∃", "existential", 0o44),
    ("%", "percent", 0o45),
    ("&", "ampersand", 0o46),
    ("∋", "suchthat", 0o47),
    ("(", "parenleft", 0o50),
    (")", "parenright", 0o51),
    ("∗", "asteriskmath", 0o52),
    ("+", "plus", 0o53),
    (",", "comma", 0o54),
    ("−", "minus", 0o55),
    (".", "period", 0o56),
    ("/", "slash", 0o57),
    ("0", "zero", 0o60),
    ("1", "one", 0o61),
    ("2", "two", 0o62),
    ("3", "three", 0o63),
    ("4", "four", 0o64),
    ("5", "five", 0o65),
    ("6", "six", 0o66),
    ("7", "seven", 0o67),
    ("8", "eight", 0o70),
    ("9", "nine", 0o71),
    (":", "colon", 0o72),
    (";", "semicolon", 0o73),
    ("<", "less", 0o74),
    ("=", "equal", 0o75),
    (">", "greater", 0o76),
    ("?", "question", 0o77),
    ("≅", "congruent", 0o100),
    ("Α", "Alpha", 0o101),
    ("Β", "Beta", 0o102),
    ("Χ", "Chi", 0o103),
    ("Δ", "Delta", 0o104),
    ("∆", "Delta", 0o104),
    ("Ε", "Epsilon", 0o105),
    ("Φ", "Phi", 0o106),
    ("Γ", "Gamma", 0o107),
    ("Η", "Eta", 0o110),
    ("Ι", "Iota", 0o111),
    ("ϑ", "theta1", 0o112),
    ("Κ", "Kappa", 0o113),
    ("Λ", "Lambda", 0o114),
    ("Μ", "Mu", 0o115),
    ("Ν", "Nu", 0o116),
    ("Ο", "Omicron", 0o117),
    ("Π", "Pi", 0o120),
    ("Θ", "Theta", 0o121),
    ("Ρ", "Rho", 0o122),
    ("Σ", "Sigma", 0o123),
    ("Τ", "Tau", 0o124),
    ("Υ", "Upsilon", 0o125),
    ("ς", "sigma1", 0o126),
    ("Ω", "Omega", 0o127),
    ("Ω", "Omega", 0o127),
    ("Ξ", "Xi", 0o130),
    ("Ψ", "Psi", 0o131),
    ("Ζ", "Zeta", 0o132),
    ("[", "bracketleft", 0o133),
    ("∴", "therefore", 0o134),
    ("]", "bracketright", 0o135),
    ("⊥", "perpendicular", 0o136),
    ("_", "underscore", 0o137),
    ("\u0305", "radicalex", 0o140),
    ("α", "alpha", 0o141),
    ("β", "beta", 0o142),
    ("χ", "chi", 0o143),
    ("δ", "delta", 0o144),
    ("ε", "epsilon", 0o145),
    ("φ", "phi", 0o146),
    ("γ", "gamma", 0o147),
    ("η", "eta", 0o150),
    ("ι", "iota", 0o151),
    ("ϕ", "phi1", 0o152),
    ("κ", "kappa", 0o153),
    ("λ", "lambda", 0o154),
    ("µ", "mu", 0o155),
    ("μ", "mu", 0o155),
    ("ν", "nu", 0o156),
    ("ο", "omicron", 0o157),
    ("π", "pi", 0o160),
    ("θ", "theta", 0o161),
    ("ρ", "rho", 0o162),
    ("σ", "sigma", 0o163),
    ("τ", "tau", 0o164),
    ("υ", "upsilon", 0o165),
    ("ϖ", "omega1", 0o166),
    ("ω", "omega", 0o167),
    ("ξ", "xi", 0o170),
    ("ψ", "psi", 0o171),
    ("ζ", "zeta", 0o172),
    ("{", "braceleft", 0o173),
    ("|", "bar", 0o174),
    ("}", "braceright", 0o175),
    ("∼", "similar", 0o176),
    ("€", "Euro", 0o240),
    ("ϒ", "Upsilon1", 0o241),
    ("′", "minute", 0o242),
    ("≤", "lessequal", 0o243),
    ("⁄", "fraction", 0o244),
    ("∕", "fraction", 0o244),
    ("∞", "infinity", 0o245),
    ("ƒ", "florin", 0o246),
    ("♣", "club", 0o247),
    ("♦", "diamond", 0o250),
    ("♥", "heart", 0o251),
    ("♠", "spade", 0o252),
    ("↔", "arrowboth", 0o253),
    ("←", "arrowleft", 0o254),
    ("↑", "arrowup", 0o255),
    ("→", "arrowright", 0o256),
    ("↓", "arrowdown", 0o257),
    ("°", "degree", 0o260),
    ("±", "plusminus", 0o261),
    ("″", "second", 0o262),
    ("≥", "greaterequal", 0o263),
    ("×", "multiply", 0o264),
    ("∝", "proportional", 0o265),
    ("∂", "partialdiff", 0o266),
    ("•", "bullet", 0o267),
    ("÷", "divide", 0o270),
    ("≠", "notequal", 0o271),
    ("≡", "equivalence", 0o272),
    ("≈", "approxequal", 0o273),
    ("…", "ellipsis", 0o274),
    ("⏐", "arrowvertex", 0o275),
    ("⎯", "arrowhorizex", 0o276),
    ("↵", "carriagereturn", 0o277),
    ("ℵ", "aleph", 0o300),
    ("ℑ", "Ifraktur", 0o301),
    ("ℜ", "Rfraktur", 0o302),
    ("℘", "weierstrass", 0o303),
    ("⊗", "circlemultiply", 0o304),
    ("⊕", "circleplus", 0o305),
    ("∅", "emptyset", 0o306),
    ("∩", "intersection", 0o307),
    ("∪", "union", 0o310),
    ("⊃", "propersuperset", 0o311),
    ("⊇", "reflexsuperset", 0o312),
    ("⊄", "notsubset", 0o313),
    ("⊂", "propersubset", 0o314),
    ("⊆", "reflexsubset", 0o315),
    ("∈", "element", 0o316),
    ("∉", "notelement", 0o317),
    ("∠", "angle", 0o320),
    ("∇", "gradient", 0o321),
    ("®", "registerserif", 0o322),
    ("©", "copyrightserif", 0o323),
    ("™", "trademarkserif", 0o324),
    ("∏", "product", 0o325),
    ("√", "radical", 0o326),
    ("⋅", "dotmath", 0o327),
    ("¬", "logicalnot", 0o330),
    ("∧", "logicaland", 0o331),
    ("∨", "logicalor", 0o332),
    ("⇔", "arrowdblboth", 0o333),
    ("⇐", "arrowdblleft", 0o334),
    ("⇑", "arrowdblup", 0o335),
    ("⇒", "arrowdblright", 0o336),
    ("⇓", "arrowdbldown", 0o337),
    ("◊", "lozenge", 0o340),
    ("〈", "angleleft", 0o341),
    ("®", "registersans", 0o342),
    ("©", "copyrightsans", 0o343),
    ("™", "trademarksans", 0o344),
    ("∑", "summation", 0o345),
    ("⎛", "parenlefttp", 0o346),
    ("⎜", "parenleftex", 0o347),
    ("⎝", "parenleftbt", 0o350),
    ("⎡", "bracketlefttp", 0o351),
    ("⎢", "bracketleftex", 0o352),
    ("⎣", "bracketleftbt", 0o353),
    ("⎧", "bracelefttp", 0o354),
    ("⎨", "braceleftmid", 0o355),
    ("⎩", "braceleftbt", 0o356),
    ("⎪", "braceex", 0o357),
    ("〉", "angleright", 0o361),
    ("∫", "integral", 0o362),
    ("⌠", "integraltp", 0o363),
    ("⎮", "integralex", 0o364),
    ("⌡", "integralbt", 0o365),
    ("⎞", "parenrighttp", 0o366),
    ("⎟", "parenrightex", 0o367),
    ("⎠", "parenrightbt", 0o370),
    ("⎤", "bracketrighttp", 0o371),
    ("⎥", "bracketrightex", 0o372),
    ("⎦", "bracketrightbt", 0o373),
    ("⎫", "bracerighttp", 0o374),
    ("⎬", "bracerightmid", 0o375),
    ("⎭", "bracerightbt", 0o376),
)

ZAPFDINGBATS_GLYPHS = (
    (" ", "space", 0o40),
    ("\u00a0", "space", 0o40),
    ("✁", "a1", 0o41),
    ("✂", "a2", 0o42),
    ("✃", "a202", 0o43),
    ("✄", "a3", 0o44),
    ("☎", "a4", 0o45),
    ("✆", "a5", 0o46),
    ("✇", "a119", 0o47),
    ("✈", "a118", 0o50),
    ("✉", "a117", 0o51),
    ("☛", "a11", 0o52),
    ("☞", "a12", 0o53),
    ("✌", "a13", 0o54),
    ("✍", "a14", 0o55),
    ("✎", "a15", 0o56),
    ("✏", "a16", 0o57),
    ("✐", "a105", 0o60),
    ("✑", "a17", 0o61),
    ("✒", "a18", 0o62),
    ("✓", "a19", 0o63),
    ("✔", "a20", 0o64),
    ("✕", "a21", 0o65),
    ("✖", "a22", 0o66),
    ("✗", "a23", 0o67),
    ("✘", "a24", 0o70),
    ("✙", "a25", 0o71),
    ("✚", "a26", 0o72),
    ("✛", "a27", 0o73),
    ("✜", "a28", 0o74),
    ("✝", "a6", 0o75),
    ("✞", "a7", 0o76),
    ("✟", "a8", 0o77),
    ("✠", "a9", 0o100),
    ("✡", "a10", 0o101),
    ("✢", "a29", 0o102),
    ("✣", "a30", 0o103),
    ("✤", "a31", 0o104),
    ("✥", "a32", 0o105),
    ("✦", "a33", 0o106),
    ("✧", "a34", 0o107),
    ("★", "a35", 0o110),
    ("✩", "a36", 0o111),
    ("✪", "a37", 0o112),
    ("✫", "a38", 0o113),
    ("✬", "a39", 0o114),
    ("✭", "a40", 0o115),
    ("✮", "a41", 0o116),
    ("✯", "a42", 0o117),
    ("✰", "a43", 0o120),
    ("✱", "a44", 0o121),
    ("✲", "a45", 0o122),
    ("✳", "a46", 0o123),
    ("✴", "a47", 0o124),
    ("✵", "a48", 0o125),
    ("✶", "a49", 0o126),
    ("✷", "a50", 0o127),
    ("✸", "a51", 0o130),
    ("✹", "a52", 0o131),
    ("✺", "a53", 0o132),
    ("✻", "a54", 0o133),
    ("✼", "a55", 0o134),
    ("✽", "a56", 0o135),
    ("✾", "a57", 0o136),
    ("✿", "a58", 0o137),
    ("❀", "a59", 0o140),
    ("❁", "a60", 0o141),
    ("❂", "a61", 0o142),
    ("❃", "a62", 0o143),
    ("❄", "a63", 0o144),
    ("❅", "a64", 0o145),
    ("❆", "a65", 0o146),
    ("❇", "a66", 0o147),
    ("❈", "a67", 0o150),
    ("❉", "a68", 0o151),
    ("❊", "a69", 0o152),
    ("❋", "a70", 0o153),
    ("●", "a71", 0o154),
    ("❍", "a72", 0o155),
    ("■", "a73", 0o156),
    ("❏", "a74", 0o157),
    ("❐", "a203", 0o160),
    ("❑", "a75", 0o161),
    ("❒", "a204", 0o162),
    ("▲", "a76", 0o163),
    ("▼", "a77", 0o164),
    ("◆", "a78", 0o165),
    ("❖", "a79", 0o166),
    ("◗", "a81", 0o167),
    ("❘", "a82", 0o170),
    ("❙", "a83", 0o171),
    ("❚", "a84", 0o172),
    ("❛", "a97", 0o173),
    ("❜", "a98", 0o174),
    ("❝", "a99", 0o175),
    ("❞", "a100", 0o176),
    ("❨", "a89", 0o200),
    ("❩", "a90", 0o201),
    ("❪", "a93", 0o202),
    ("❫", "a94", 0o203),
    ("❬", "a91", 0o204),
    ("❭", "a92", 0o205),
    ("❮", "a205", 0o206),
    ("❯", "a85", 0o207),
    ("❰", "a206", 0o210),
    ("❱", "a86", 0o211),
    ("❲", "a87", 0o212),
    ("❳", "a88", 0o213),
    ("❴", "a95", 0o214),
    ("❵", "a96", 0o215),
    ("❡", "a101", 0o241),
    ("❢", "a102", 0o242),
    ("❣", "a103", 0o243),
    ("❤", "a104", 0o244),
    ("❥", "a106", 0o245),
    ("❦", "a107", 0o246),
    ("❧", "a108", 0o247),
    ("♣", "a112", 0o250),
    ("♦", "a111", 0o251),
    ("♥", "a110", 0o252),
    ("♠", "a109", 0o253),
    ("①", "a120", 0o254),
    ("②", "a121", 0o255),
    ("③", "a122", 0o256),
    ("④", "a123", 0o257),
    ("⑤", "a124", 0o260),
    ("⑥", "a125", 0o261),
    ("⑦", "a126", 0o262),
    ("⑧", "a127", 0o263),
    ("⑨", "a128", 0o264),
    ("⑩", "a129", 0o265),
    ("❶", "a130", 0o266),
    ("❷", "a131", 0o267),
    ("❸", "a132", 0o270),
    ("❹", "a133", 0o271),
    ("❺", "a134", 0o272),
    ("❻", "a135", 0o273),
    ("❼", "a136", 0o274),
    ("❽", "a137", 0o275),
    ("❾", "a138", 0o276),
    ("❿", "a139", 0o277),
    ("➀", "a140", 0o300),
    ("➁", "a141", 0o301),
    ("➂", "a142", 0o302),
    ("➃", "a143", 0o303),
    ("➄", "a144", 0o304),
    ("➅", "a145", 0o305),
    ("➆", "a146", 0o306),
    ("➇", "a147", 0o307),
    ("➈", "a148", 0o310),
    ("➉", "a149", 0o311),
    ("➊", "a150", 0o312),
    ("➋", "a151", 0o313),
    ("➌", "a152", 0o314),
    ("➍", "a153", 0o315),
    ("➎", "a154", 0o316),
    ("➏", "a155", 0o317),
    ("➐", "a156", 0o320),
    ("➑", "a157", 0o321),
    ("➒", "a158", 0o322),
    ("➓", "a159", 0o323),
    ("➔", "a160", 0o324),
    ("→", "a161", 0o325),
    ("↔", "a163", 0o326),
    ("↕", "a164", 0o327),
    ("➘", "a196", 0o330),
    ("➙", "a165", 0o331),
    ("➚", "a192", 0o332),
    ("➛", "a166", 0o333),
    ("➜", "a167", 0o334),
    ("➝", "a168", 0o335),
    ("➞", "a169", 0o336),
    ("➟", "a170", 0o337),
    ("➠", "a171", 0o340),
    ("➡", "a172", 0o341),
    ("➢", "a173", 0o342),
    ("➣", "a162", 0o343),
    ("➤", "a174", 0o344),
    ("➥", "a175", 0o345),
    ("➦", "a176", 0o346),
    ("➧", "a177", 0o347),
    ("➨", "a178", 0o350),
    ("➩", "a179", 0o351),
    ("➪", "a193", 0o352),
    ("➫", "a180", 0o353),
    ("➬", "a199", 0o354),
    ("➭", "a181", 0o355),
    ("➮", "a200", 0o356),
    ("➯", "a182", 0o357),
    ("➱", "a201", 0o361),
    ("➲", "a183", 0o362),
    ("➳", "a184", 0o363),
    ("➴", "a197", 0o364),
    ("➵", "a185", 0o365),
    ("➶", "a194", 0o366),
    ("➷", "a198", 0o367),
    ("➸", "a186", 0o370),
    ("➹", "a195", 0o371),
    ("➺", "a187", 0o372),
    ("➻", "a188", 0o373),
    ("➼", "a189", 0o374),
    ("➽", "a190", 0o375),
    ("➾", "a191", 0o376),
)
