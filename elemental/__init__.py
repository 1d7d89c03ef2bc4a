# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`elemental` builds single HTML elements programmatically:
a tag name, normalized attributes (with special handling of `id`, `class` and `style`), and nested content,
rendered to an HTML string on demand.
'''

from .attributes import attr_name, Attributes
from .classes import Classes
from .content import Content
from .element import Element
from .exceptions import (ElementalError, InvalidAttrName, InvalidAttrValue, InvalidClassName, InvalidStyleName,
  InvalidTagName, UndefinedView)
from .strings import escape_url, slugify
from .styles import parse_styles, Styles
from .tag import is_content, is_heading, is_inline, is_self_closing, is_valid_tag, Tag


__all__ = [
  'Attributes',
  'Classes',
  'Content',
  'Element',
  'ElementalError',
  'InvalidAttrName',
  'InvalidAttrValue',
  'InvalidClassName',
  'InvalidStyleName',
  'InvalidTagName',
  'Styles',
  'Tag',
  'UndefinedView',
  'attr_name',
  'escape_url',
  'is_content',
  'is_heading',
  'is_inline',
  'is_self_closing',
  'is_valid_tag',
  'parse_styles',
  'slugify',
]
