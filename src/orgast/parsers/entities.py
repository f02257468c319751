#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/entities.py
"""Org entity table.

Maps entity names such as ``alpha`` or ``rightarrow`` (written ``\\alpha``
in org text) to their LaTeX, HTML and UTF-8 forms. Names follow
``org-entities.el``.
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class EntityDefinition(NamedTuple):
    latex: str
    html: str
    utf8: str


ORG_ENTITIES: dict[str, EntityDefinition] = {
    # =============================================================================
    # Greek Letters (lowercase)
    # =============================================================================
    "alpha": EntityDefinition("\\alpha", "&alpha;", "α"),
    "beta": EntityDefinition("\\beta", "&beta;", "β"),
    "gamma": EntityDefinition("\\gamma", "&gamma;", "γ"),
    "delta": EntityDefinition("\\delta", "&delta;", "δ"),
    "epsilon": EntityDefinition("\\epsilon", "&epsilon;", "ε"),
    "varepsilon": EntityDefinition("\\varepsilon", "&epsilon;", "ε"),
    "zeta": EntityDefinition("\\zeta", "&zeta;", "ζ"),
    "eta": EntityDefinition("\\eta", "&eta;", "η"),
    "theta": EntityDefinition("\\theta", "&theta;", "θ"),
    "vartheta": EntityDefinition("\\vartheta", "&thetasym;", "ϑ"),
    "iota": EntityDefinition("\\iota", "&iota;", "ι"),
    "kappa": EntityDefinition("\\kappa", "&kappa;", "κ"),
    "lambda": EntityDefinition("\\lambda", "&lambda;", "λ"),
    "mu": EntityDefinition("\\mu", "&mu;", "μ"),
    "nu": EntityDefinition("\\nu", "&nu;", "ν"),
    "xi": EntityDefinition("\\xi", "&xi;", "ξ"),
    "omicron": EntityDefinition("\\omicron", "&omicron;", "ο"),
    "pi": EntityDefinition("\\pi", "&pi;", "π"),
    "varpi": EntityDefinition("\\varpi", "&piv;", "ϖ"),
    "rho": EntityDefinition("\\rho", "&rho;", "ρ"),
    "varrho": EntityDefinition("\\varrho", "&rho;", "ρ"),
    "sigma": EntityDefinition("\\sigma", "&sigma;", "σ"),
    "varsigma": EntityDefinition("\\varsigma", "&sigmaf;", "ς"),
    "tau": EntityDefinition("\\tau", "&tau;", "τ"),
    "upsilon": EntityDefinition("\\upsilon", "&upsilon;", "υ"),
    "phi": EntityDefinition("\\phi", "&phi;", "φ"),
    "varphi": EntityDefinition("\\varphi", "&phi;", "φ"),
    "chi": EntityDefinition("\\chi", "&chi;", "χ"),
    "psi": EntityDefinition("\\psi", "&psi;", "ψ"),
    "omega": EntityDefinition("\\omega", "&omega;", "ω"),

    # =============================================================================
    # Greek Letters (uppercase)
    # =============================================================================
    "Alpha": EntityDefinition("A", "&Alpha;", "Α"),
    "Beta": EntityDefinition("B", "&Beta;", "Β"),
    "Gamma": EntityDefinition("\\Gamma", "&Gamma;", "Γ"),
    "Delta": EntityDefinition("\\Delta", "&Delta;", "Δ"),
    "Epsilon": EntityDefinition("E", "&Epsilon;", "Ε"),
    "Zeta": EntityDefinition("Z", "&Zeta;", "Ζ"),
    "Eta": EntityDefinition("H", "&Eta;", "Η"),
    "Theta": EntityDefinition("\\Theta", "&Theta;", "Θ"),
    "Iota": EntityDefinition("I", "&Iota;", "Ι"),
    "Kappa": EntityDefinition("K", "&Kappa;", "Κ"),
    "Lambda": EntityDefinition("\\Lambda", "&Lambda;", "Λ"),
    "Mu": EntityDefinition("M", "&Mu;", "Μ"),
    "Nu": EntityDefinition("N", "&Nu;", "Ν"),
    "Xi": EntityDefinition("\\Xi", "&Xi;", "Ξ"),
    "Omicron": EntityDefinition("O", "&Omicron;", "Ο"),
    "Pi": EntityDefinition("\\Pi", "&Pi;", "Π"),
    "Rho": EntityDefinition("P", "&Rho;", "Ρ"),
    "Sigma": EntityDefinition("\\Sigma", "&Sigma;", "Σ"),
    "Tau": EntityDefinition("T", "&Tau;", "Τ"),
    "Upsilon": EntityDefinition("\\Upsilon", "&Upsilon;", "Υ"),
    "Phi": EntityDefinition("\\Phi", "&Phi;", "Φ"),
    "Chi": EntityDefinition("X", "&Chi;", "Χ"),
    "Psi": EntityDefinition("\\Psi", "&Psi;", "Ψ"),
    "Omega": EntityDefinition("\\Omega", "&Omega;", "Ω"),

    # =============================================================================
    # Hebrew Letters
    # =============================================================================
    "aleph": EntityDefinition("\\aleph", "&alefsym;", "ℵ"),
    "beth": EntityDefinition("\\beth", "ℶ", "ℶ"),
    "gimel": EntityDefinition("\\gimel", "ℷ", "ℷ"),
    "daleth": EntityDefinition("\\daleth", "ℸ", "ℸ"),

    # =============================================================================
    # Arrows
    # =============================================================================
    "leftarrow": EntityDefinition("\\leftarrow", "&larr;", "←"),
    "uparrow": EntityDefinition("\\uparrow", "&uarr;", "↑"),
    "rightarrow": EntityDefinition("\\rightarrow", "&rarr;", "→"),
    "downarrow": EntityDefinition("\\downarrow", "&darr;", "↓"),
    "leftrightarrow": EntityDefinition("\\leftrightarrow", "&harr;", "↔"),
    "updownarrow": EntityDefinition("\\updownarrow", "↕", "↕"),
    "nwarrow": EntityDefinition("\\nwarrow", "↖", "↖"),
    "nearrow": EntityDefinition("\\nearrow", "↗", "↗"),
    "searrow": EntityDefinition("\\searrow", "↘", "↘"),
    "swarrow": EntityDefinition("\\swarrow", "↙", "↙"),
    "Leftarrow": EntityDefinition("\\Leftarrow", "&lArr;", "⇐"),
    "Uparrow": EntityDefinition("\\Uparrow", "&uArr;", "⇑"),
    "Rightarrow": EntityDefinition("\\Rightarrow", "&rArr;", "⇒"),
    "Downarrow": EntityDefinition("\\Downarrow", "&dArr;", "⇓"),
    "Leftrightarrow": EntityDefinition("\\Leftrightarrow", "&hArr;", "⇔"),
    "Updownarrow": EntityDefinition("\\Updownarrow", "⇕", "⇕"),
    "mapsto": EntityDefinition("\\mapsto", "↦", "↦"),
    "hookleftarrow": EntityDefinition("\\hookleftarrow", "↩", "↩"),
    "hookrightarrow": EntityDefinition("\\hookrightarrow", "↪", "↪"),
    "to": EntityDefinition("\\to", "&rarr;", "→"),
    "gets": EntityDefinition("\\gets", "&larr;", "←"),

    # =============================================================================
    # Mathematical Operators
    # =============================================================================
    "plus": EntityDefinition("+", "+", "+"),
    "minus": EntityDefinition("-", "&minus;", "−"),
    "pm": EntityDefinition("\\pm", "&plusmn;", "±"),
    "mp": EntityDefinition("\\mp", "∓", "∓"),
    "times": EntityDefinition("\\times", "&times;", "×"),
    "div": EntityDefinition("\\div", "&divide;", "÷"),
    "cdot": EntityDefinition("\\cdot", "⋅", "⋅"),
    "ast": EntityDefinition("\\ast", "*", "∗"),
    "star": EntityDefinition("\\star", "☆", "⋆"),
    "circ": EntityDefinition("\\circ", "∘", "∘"),
    "bullet": EntityDefinition("\\bullet", "&bull;", "•"),
    "oplus": EntityDefinition("\\oplus", "&oplus;", "⊕"),
    "ominus": EntityDefinition("\\ominus", "⊖", "⊖"),
    "otimes": EntityDefinition("\\otimes", "&otimes;", "⊗"),
    "circledslash": EntityDefinition("\\oslash", "⊘", "⊘"),
    "odot": EntityDefinition("\\odot", "⊙", "⊙"),

    # =============================================================================
    # Relations
    # =============================================================================
    "leq": EntityDefinition("\\leq", "&le;", "≤"),
    "le": EntityDefinition("\\le", "&le;", "≤"),
    "geq": EntityDefinition("\\geq", "&ge;", "≥"),
    "ge": EntityDefinition("\\ge", "&ge;", "≥"),
    "neq": EntityDefinition("\\neq", "&ne;", "≠"),
    "ne": EntityDefinition("\\ne", "&ne;", "≠"),
    "approx": EntityDefinition("\\approx", "&asymp;", "≈"),
    "sim": EntityDefinition("\\sim", "∼", "∼"),
    "simeq": EntityDefinition("\\simeq", "≃", "≃"),
    "cong": EntityDefinition("\\cong", "&cong;", "≅"),
    "equiv": EntityDefinition("\\equiv", "&equiv;", "≡"),
    "propto": EntityDefinition("\\propto", "&prop;", "∝"),
    "prec": EntityDefinition("\\prec", "≺", "≺"),
    "succ": EntityDefinition("\\succ", "≻", "≻"),
    "preceq": EntityDefinition("\\preceq", "⪯", "⪯"),
    "succeq": EntityDefinition("\\succeq", "⪰", "⪰"),
    "ll": EntityDefinition("\\ll", "≪", "≪"),
    "gg": EntityDefinition("\\gg", "≫", "≫"),
    "subset": EntityDefinition("\\subset", "&sub;", "⊂"),
    "supset": EntityDefinition("\\supset", "&sup;", "⊃"),
    "subseteq": EntityDefinition("\\subseteq", "&sube;", "⊆"),
    "supseteq": EntityDefinition("\\supseteq", "&supe;", "⊇"),
    "in": EntityDefinition("\\in", "&isin;", "∈"),
    "notin": EntityDefinition("\\notin", "&notin;", "∉"),
    "ni": EntityDefinition("\\ni", "&ni;", "∋"),
    "perp": EntityDefinition("\\perp", "&perp;", "⊥"),
    "parallel": EntityDefinition("\\parallel", "∥", "∥"),
    "mid": EntityDefinition("\\mid", "∣", "∣"),

    # =============================================================================
    # Set Theory and Logic
    # =============================================================================
    "cap": EntityDefinition("\\cap", "&cap;", "∩"),
    "cup": EntityDefinition("\\cup", "&cup;", "∪"),
    "land": EntityDefinition("\\land", "&and;", "∧"),
    "lor": EntityDefinition("\\lor", "&or;", "∨"),
    "lnot": EntityDefinition("\\lnot", "&not;", "¬"),
    "neg": EntityDefinition("\\neg", "&not;", "¬"),
    "forall": EntityDefinition("\\forall", "&forall;", "∀"),
    "exists": EntityDefinition("\\exists", "&exist;", "∃"),
    "nexists": EntityDefinition("\\nexists", "∄", "∄"),
    "emptyset": EntityDefinition("\\emptyset", "&empty;", "∅"),
    "varnothing": EntityDefinition("\\varnothing", "⌀", "⌀"),

    # =============================================================================
    # Calculus and Analysis
    # =============================================================================
    "nabla": EntityDefinition("\\nabla", "&nabla;", "∇"),
    "partial": EntityDefinition("\\partial", "&part;", "∂"),
    "infty": EntityDefinition("\\infty", "&infin;", "∞"),
    "int": EntityDefinition("\\int", "&int;", "∫"),
    "iint": EntityDefinition("\\iint", "∬", "∬"),
    "iiint": EntityDefinition("\\iiint", "∭", "∭"),
    "oint": EntityDefinition("\\oint", "∮", "∮"),
    "sum": EntityDefinition("\\sum", "&sum;", "∑"),
    "prod": EntityDefinition("\\prod", "&prod;", "∏"),
    "coprod": EntityDefinition("\\coprod", "∐", "∐"),
    "sqrt": EntityDefinition("\\sqrt{}", "&radic;", "√"),

    # =============================================================================
    # Miscellaneous Math Symbols
    # =============================================================================
    "prime": EntityDefinition("\\prime", "&prime;", "′"),
    "dprime": EntityDefinition("\\prime\\prime", "″", "″"),
    "angle": EntityDefinition("\\angle", "&ang;", "∠"),
    "triangle": EntityDefinition("\\triangle", "▵", "△"),
    "diamond": EntityDefinition("\\diamond", "⋄", "⋄"),
    "Box": EntityDefinition("\\Box", "□", "□"),
    "ell": EntityDefinition("\\ell", "ℓ", "ℓ"),
    "hbar": EntityDefinition("\\hbar", "ℏ", "ℏ"),
    "Re": EntityDefinition("\\Re", "ℜ", "ℜ"),
    "Im": EntityDefinition("\\Im", "ℑ", "ℑ"),
    "wp": EntityDefinition("\\wp", "℘", "℘"),

    # =============================================================================
    # Typography and Punctuation
    # =============================================================================
    "nbsp": EntityDefinition("~", "&nbsp;", "\u00A0"),
    "ensp": EntityDefinition("\\enspace", "&ensp;", "\u2002"),
    "emsp": EntityDefinition("\\quad", "&emsp;", "\u2003"),
    "thinsp": EntityDefinition("\\,", "&thinsp;", "\u2009"),
    "shy": EntityDefinition("\\-", "&shy;", "\u00AD"),
    "ndash": EntityDefinition("--", "&ndash;", "–"),
    "mdash": EntityDefinition("---", "&mdash;", "—"),
    "lsquo": EntityDefinition("`", "&lsquo;", "\u2018"),
    "rsquo": EntityDefinition("'", "&rsquo;", "\u2019"),
    "sbquo": EntityDefinition(",", "&sbquo;", "\u201A"),
    "ldquo": EntityDefinition("``", "&ldquo;", "\u201C"),
    "rdquo": EntityDefinition("''", "&rdquo;", "\u201D"),
    "bdquo": EntityDefinition(",,", "&bdquo;", "\u201E"),
    "laquo": EntityDefinition("\\guillemotleft", "&laquo;", "«"),
    "raquo": EntityDefinition("\\guillemotright", "&raquo;", "»"),
    "lsaquo": EntityDefinition("\\guilsinglleft", "&lsaquo;", "‹"),
    "rsaquo": EntityDefinition("\\guilsinglright", "&rsaquo;", "›"),
    "hellip": EntityDefinition("\\ldots{}", "&hellip;", "…"),
    "dots": EntityDefinition("\\ldots{}", "&hellip;", "…"),
    "cdots": EntityDefinition("\\cdots{}", "⋯", "⋯"),
    "vdots": EntityDefinition("\\vdots{}", "⋮", "⋮"),
    "ddots": EntityDefinition("\\ddots{}", "⋱", "⋱"),

    # =============================================================================
    # Currency and Commercial
    # =============================================================================
    "cent": EntityDefinition("\\textcent{}", "&cent;", "¢"),
    "pound": EntityDefinition("\\pounds{}", "&pound;", "£"),
    "yen": EntityDefinition("\\yen{}", "&yen;", "¥"),
    "euro": EntityDefinition("\\texteuro{}", "&euro;", "€"),
    "copy": EntityDefinition("\\copyright{}", "&copy;", "©"),
    "reg": EntityDefinition("\\textregistered{}", "&reg;", "®"),
    "trade": EntityDefinition("\\texttrademark{}", "&trade;", "™"),

    # =============================================================================
    # Accented Characters
    # =============================================================================
    "Agrave": EntityDefinition("\\`{A}", "&Agrave;", "À"),
    "agrave": EntityDefinition("\\`{a}", "&agrave;", "à"),
    "Aacute": EntityDefinition("\\'{A}", "&Aacute;", "Á"),
    "aacute": EntityDefinition("\\'{a}", "&aacute;", "á"),
    "Acirc": EntityDefinition("\\^{A}", "&Acirc;", "Â"),
    "acirc": EntityDefinition("\\^{a}", "&acirc;", "â"),
    "Atilde": EntityDefinition("\\~{A}", "&Atilde;", "Ã"),
    "atilde": EntityDefinition("\\~{a}", "&atilde;", "ã"),
    "Auml": EntityDefinition('\\"{A}', "&Auml;", "Ä"),
    "auml": EntityDefinition('\\"{a}', "&auml;", "ä"),
    "Aring": EntityDefinition("\\AA{}", "&Aring;", "Å"),
    "aring": EntityDefinition("\\aa{}", "&aring;", "å"),
    "AElig": EntityDefinition("\\AE{}", "&AElig;", "Æ"),
    "aelig": EntityDefinition("\\ae{}", "&aelig;", "æ"),
    "Ccedil": EntityDefinition("\\c{C}", "&Ccedil;", "Ç"),
    "ccedil": EntityDefinition("\\c{c}", "&ccedil;", "ç"),
    "Egrave": EntityDefinition("\\`{E}", "&Egrave;", "È"),
    "egrave": EntityDefinition("\\`{e}", "&egrave;", "è"),
    "Eacute": EntityDefinition("\\'{E}", "&Eacute;", "É"),
    "eacute": EntityDefinition("\\'{e}", "&eacute;", "é"),
    "Ecirc": EntityDefinition("\\^{E}", "&Ecirc;", "Ê"),
    "ecirc": EntityDefinition("\\^{e}", "&ecirc;", "ê"),
    "Euml": EntityDefinition('\\"{E}', "&Euml;", "Ë"),
    "euml": EntityDefinition('\\"{e}', "&euml;", "ë"),
    "Igrave": EntityDefinition("\\`{I}", "&Igrave;", "Ì"),
    "igrave": EntityDefinition("\\`{i}", "&igrave;", "ì"),
    "Iacute": EntityDefinition("\\'{I}", "&Iacute;", "Í"),
    "iacute": EntityDefinition("\\'{i}", "&iacute;", "í"),
    "Icirc": EntityDefinition("\\^{I}", "&Icirc;", "Î"),
    "icirc": EntityDefinition("\\^{i}", "&icirc;", "î"),
    "Iuml": EntityDefinition('\\"{I}', "&Iuml;", "Ï"),
    "iuml": EntityDefinition('\\"{i}', "&iuml;", "ï"),
    "ETH": EntityDefinition("\\DH{}", "&ETH;", "Ð"),
    "eth": EntityDefinition("\\dh{}", "&eth;", "ð"),
    "Ntilde": EntityDefinition("\\~{N}", "&Ntilde;", "Ñ"),
    "ntilde": EntityDefinition("\\~{n}", "&ntilde;", "ñ"),
    "Ograve": EntityDefinition("\\`{O}", "&Ograve;", "Ò"),
    "ograve": EntityDefinition("\\`{o}", "&ograve;", "ò"),
    "Oacute": EntityDefinition("\\'{O}", "&Oacute;", "Ó"),
    "oacute": EntityDefinition("\\'{o}", "&oacute;", "ó"),
    "Ocirc": EntityDefinition("\\^{O}", "&Ocirc;", "Ô"),
    "ocirc": EntityDefinition("\\^{o}", "&ocirc;", "ô"),
    "Otilde": EntityDefinition("\\~{O}", "&Otilde;", "Õ"),
    "otilde": EntityDefinition("\\~{o}", "&otilde;", "õ"),
    "Ouml": EntityDefinition('\\"{O}', "&Ouml;", "Ö"),
    "ouml": EntityDefinition('\\"{o}', "&ouml;", "ö"),
    "Oslash": EntityDefinition("\\O{}", "&Oslash;", "Ø"),
    "oslash": EntityDefinition("\\o{}", "&oslash;", "ø"),
    "OElig": EntityDefinition("\\OE{}", "&OElig;", "Œ"),
    "oelig": EntityDefinition("\\oe{}", "&oelig;", "œ"),
    "Scaron": EntityDefinition("\\v{S}", "&Scaron;", "Š"),
    "scaron": EntityDefinition("\\v{s}", "&scaron;", "š"),
    "szlig": EntityDefinition("\\ss{}", "&szlig;", "ß"),
    "Ugrave": EntityDefinition("\\`{U}", "&Ugrave;", "Ù"),
    "ugrave": EntityDefinition("\\`{u}", "&ugrave;", "ù"),
    "Uacute": EntityDefinition("\\'{U}", "&Uacute;", "Ú"),
    "uacute": EntityDefinition("\\'{u}", "&uacute;", "ú"),
    "Ucirc": EntityDefinition("\\^{U}", "&Ucirc;", "Û"),
    "ucirc": EntityDefinition("\\^{u}", "&ucirc;", "û"),
    "Uuml": EntityDefinition('\\"{U}', "&Uuml;", "Ü"),
    "uuml": EntityDefinition('\\"{u}', "&uuml;", "ü"),
    "Yacute": EntityDefinition("\\'{Y}", "&Yacute;", "Ý"),
    "yacute": EntityDefinition("\\'{y}", "&yacute;", "ý"),
    "Yuml": EntityDefinition('\\"{Y}', "&Yuml;", "Ÿ"),
    "yuml": EntityDefinition('\\"{y}', "&yuml;", "ÿ"),
    "THORN": EntityDefinition("\\TH{}", "&THORN;", "Þ"),
    "thorn": EntityDefinition("\\th{}", "&thorn;", "þ"),

    # =============================================================================
    # Miscellaneous
    # =============================================================================
    "dagger": EntityDefinition("\\dag{}", "&dagger;", "†"),
    "Dagger": EntityDefinition("\\ddag{}", "&Dagger;", "‡"),
    "sect": EntityDefinition("\\S{}", "&sect;", "§"),
    "para": EntityDefinition("\\P{}", "&para;", "¶"),
    "deg": EntityDefinition("\\textdegree{}", "&deg;", "°"),
    "checkmark": EntityDefinition("\\checkmark", "✓", "✓"),
    "smiley": EntityDefinition("\\smiley{}", "☺", "☺"),
    "frowny": EntityDefinition("\\frowny{}", "☹", "☹"),
    "clubs": EntityDefinition("\\clubsuit", "&clubs;", "♣"),
    "diamonds": EntityDefinition("\\diamondsuit", "&diams;", "♦"),
    "hearts": EntityDefinition("\\heartsuit", "&hearts;", "♥"),
    "spades": EntityDefinition("\\spadesuit", "&spades;", "♠"),
    "flat": EntityDefinition("\\flat", "♭", "♭"),
    "natural": EntityDefinition("\\natural", "♮", "♮"),
    "sharp": EntityDefinition("\\sharp", "♯", "♯"),
    "iexcl": EntityDefinition("!`", "&iexcl;", "¡"),
    "iquest": EntityDefinition("?`", "&iquest;", "¿"),
    "ordf": EntityDefinition("\\textordfeminine{}", "&ordf;", "ª"),
    "ordm": EntityDefinition("\\textordmasculine{}", "&ordm;", "º"),
    "micro": EntityDefinition("\\textmu{}", "&micro;", "µ"),
    "frac14": EntityDefinition("\\textonequarter{}", "&frac14;", "¼"),
    "frac12": EntityDefinition("\\textonehalf{}", "&frac12;", "½"),
    "frac34": EntityDefinition("\\textthreequarters{}", "&frac34;", "¾"),
    "sup1": EntityDefinition("\\textonesuperior{}", "&sup1;", "¹"),
    "sup2": EntityDefinition("\\texttwosuperior{}", "&sup2;", "²"),
    "sup3": EntityDefinition("\\textthreesuperior{}", "&sup3;", "³"),
}


def get_entity(name: str) -> Optional[EntityDefinition]:
    """Return the definition of entity ``name``, or None if it is unknown."""
    return ORG_ENTITIES.get(name)


def is_valid_entity(name: str) -> bool:
    return name in ORG_ENTITIES
