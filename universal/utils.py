import re
import warnings
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Order matters, the two byte nbsp has to go before the bare one
MOJIBAKE = [
    ("Âº", "º"),
    ("Ã\u0097", "×"),
    ("â\u0080\u0091", "‑"),
    ("â\u0080\u0093", "–"),
    ("â\u0080\u0094", "—"),
    ("â\u0080\u0098", "‘"),
    ("â\u0080\u0099", "’"),
    ("â\u0080\u009c", "“"),
    ("â\u0080\u009d", "”"),
    ("â\u0080¦", "…"),
    # same damage after a cp1252 round trip
    ("â€”", "—"),
    ("â€“", "–"),
    ("â€™", "’"),
    ("â€œ", "“"),
    ("â€\u009d", "”"),
    ("Ê¼", "’"),  # was u02BC
    ("&amp;", "&"),
    ("&nbsp;", " "),
    ("\u00c2\u00a0", " "),
    ("\u00a0", " "),
]


def replace_entities(text):
    for bad, good in MOJIBAKE:
        text = text.replace(bad, good)
    return text


def filter_entities(text):
    text = replace_entities(text)
    return collapse_whitespace(text)


def collapse_whitespace(text):
    return re.sub(r"\s+", " ", text).strip()


def recursive_filter_entities(data):
    # Leaves newlines alone, only fixes the encoding damage
    if isinstance(data, dict):
        for k, v in data.items():
            if isinstance(v, str):
                data[k] = replace_entities(v)
            else:
                recursive_filter_entities(v)
    elif isinstance(data, list):
        for i, v in enumerate(data):
            if isinstance(v, str):
                data[i] = replace_entities(v)
            else:
                recursive_filter_entities(v)
    return data


def has_markup(text):
    return re.search(r"</?[a-zA-Z][^>]*>", text) is not None


def clear_tags(text, taglist):
    bs = BeautifulSoup(text, 'html.parser')
    for tag in taglist:
        for t in bs.find_all(tag):
            t.replace_with(t.get_text())
    return filter_entities(str(bs))


def find_list(text, elements):
    """Returns the first element found inside text, or False."""
    for element in elements:
        if text.find(element) > -1:
            return element
    return False


def join_fragments(fragments, sep=" "):
    return sep.join([f for f in fragments if f]).strip()
