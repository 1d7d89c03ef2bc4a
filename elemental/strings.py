# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
String coercion and escaping utilities used at every ingestion boundary of the element model.
'''

import re
from enum import Enum
from html import escape as _escape
from typing import Any, Union
from unicodedata import normalize as _unicode_normalize
from urllib.parse import quote

from .exceptions import InvalidAttrValue


# The closed set of scalar values accepted for attributes, class tokens, style values and content.
# `Any` stands in for "stringable" objects: those that implement `__html__` or override `__str__`.
AttrVal = Union[None, bool, str, int, float, Enum, Any]


def is_stringable(value:Any) -> bool:
  'Whether or not `value` has a meaningful string form.'
  if isinstance(value, bool): return False
  if isinstance(value, (str, int, float, Enum)): return True
  if hasattr(value, '__html__'): return True
  return type(value).__str__ is not object.__str__


def as_str(value:Any) -> str:
  '''
  Convert a scalar or stringable value to its canonical string form.
  * Mixin enums (`StrEnum`, `IntEnum`) render as their value; plain enums render as their member name.
  * Integral floats render without a fractional part.
  * Objects implementing `__html__` (e.g. `markupsafe.Markup`, `Element`) render via that method.
  Raises `InvalidAttrValue` for anything else, including `None` and `bool`.
  '''
  if isinstance(value, Enum):
    if isinstance(value, (str, int)): return as_str(value.value)
    return value.name
  if isinstance(value, str): return value
  if isinstance(value, bool) or value is None:
    raise InvalidAttrValue(f'expected a stringable value; received: {value!r}')
  if isinstance(value, float): return str(prefer_int(value))
  if isinstance(value, int): return str(value)
  if hasattr(value, '__html__'): return str(value.__html__())
  if type(value).__str__ is not object.__str__: return str(value)
  raise InvalidAttrValue(f'value of type {type(value).__name__!r} is not stringable: {value!r}')


def attr_val(value:AttrVal) -> bool|str|None:
  'Coerce an attribute value: `None` and booleans pass through; everything else is converted by `as_str`.'
  if value is None or isinstance(value, bool): return value
  return as_str(value)


def prefer_int(v:float) -> int|float:
  'Convert integral floats to int.'
  i = int(v)
  return i if i == v else v


def slugify(raw:str) -> str:
  '''
  Normalize `raw` into a lowercase, hyphen-separated ASCII identifier.
  Accented letters are folded to their ASCII base; all other runs of non-alphanumeric characters become a single hyphen.
  '''
  ascii_str = _unicode_normalize('NFKD', raw).encode('ascii', 'ignore').decode('ascii')
  return _slug_invalid_re.sub('-', ascii_str.lower()).strip('-')

_slug_invalid_re = re.compile(r'[^a-z0-9]+')


def escape_url(raw:str) -> str:
  '''
  Percent-escape characters that cannot appear in a URL.
  Reserved characters and existing percent escapes are left intact, so already-escaped URLs are unchanged.
  '''
  return quote(raw.strip(), safe=_url_safe_chars)

_url_safe_chars = ":/?#[]@!$&'()*+,;=%~"


def escape_attr(raw:str) -> str:
  'Escape an attribute value for embedding in a double-quoted attribute.'
  return _escape(raw, quote=True)


def strip_tags(html:str) -> str:
  'Remove anything that looks like a tag. This is a text heuristic, not a parser.'
  return _tag_re.sub('', html)

_tag_re = re.compile(r'<[^>]*>')


def normalize_ws(text:str) -> str:
  'Collapse runs of whitespace to a single space and strip the ends.'
  return _ws_re.sub(' ', text).strip()

_ws_re = re.compile(r'\s+')
