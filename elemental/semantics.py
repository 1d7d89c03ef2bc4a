# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tag registries: static classification data for HTML tag names.
These tables are built once at import time and never mutated.
'''

structure_tags = frozenset({
  'address',
  'article',
  'aside',
  'audio',
  'blockquote',
  'body',
  'canvas',
  'caption',
  'colgroup',
  'datalist',
  'dd',
  'details',
  'dialog',
  'div',
  'dl',
  'dt',
  'fieldset',
  'figcaption',
  'figure',
  'footer',
  'form',
  'head',
  'header',
  'hgroup',
  'html',
  'iframe',
  'legend',
  'li',
  'main',
  'menu',
  'nav',
  'noscript',
  'object',
  'ol',
  'optgroup',
  'option',
  'picture',
  'pre',
  'script',
  'search',
  'section',
  'select',
  'style',
  'summary',
  'table',
  'tbody',
  'td',
  'template',
  'textarea',
  'tfoot',
  'th',
  'thead',
  'title',
  'tr',
  'ul',
  'video',
})

content_tags = frozenset({
  'p',
})

heading_tags = frozenset({ 'h1', 'h2', 'h3', 'h4', 'h5', 'h6' })

inline_tags = frozenset({
  'a',
  'abbr',
  'b',
  'bdi',
  'bdo',
  'button',
  'cite',
  'code',
  'data',
  'del',
  'dfn',
  'em',
  'i',
  'ins',
  'kbd',
  'label',
  'mark',
  'meter',
  'output',
  'progress',
  'q',
  's',
  'samp',
  'small',
  'span',
  'strong',
  'sub',
  'sup',
  'time',
  'u',
  'var',
})

# Void elements: these never have content or a closing tag.
self_closing_tags = frozenset({
  'area',
  'base',
  'br',
  'col',
  'embed',
  'hr',
  'img',
  'input',
  'link',
  'meta',
  'param',
  'source',
  'track',
  'wbr',
})

all_tags = structure_tags | content_tags | heading_tags | inline_tags

valid_tags = all_tags | self_closing_tags

# Tags whose children are text-level content.
content_model_tags = heading_tags | inline_tags | frozenset({'p'})
