from markdownify import MarkdownConverter
from universal.utils import filter_entities, has_markup, clear_tags

# Links are navigation on the wiki and spans are item or skill tooltips,
# only their text is kept
INLINE_WRAPPERS = ['a', 'span']


class NodeTextConverter(MarkdownConverter):
    convert_u = MarkdownConverter.convert_i

    def convert_img(self, el, text, *args, **kwargs):
        return el.attrs.get('alt', '') if el.attrs else ''


# Create shorthand method for conversion
def md(html, **options):
    options.setdefault('escape_underscores', False)
    options.setdefault('escape_asterisks', False)
    options.setdefault('escape_misc', False)
    return NodeTextConverter(**options).convert(html)


def markdown_text(text):
    if text is None:
        return ""
    text = str(text)
    if has_markup(text):
        text = md(clear_tags(text, INLINE_WRAPPERS))
    return filter_entities(text)
