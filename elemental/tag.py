# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Tag` validates, classifies and renders an element's tag name.
'''

import logging
from typing import Any, Mapping, Self

from . import semantics
from .attributes import Attributes
from .exceptions import InvalidTagName
from .strings import as_str, is_stringable


log = logging.getLogger(__name__)

# How far past a `<` to look for a tag name when extracting one from raw markup.
_tag_scan_limit = 25
_tag_scan_stops = frozenset(':- >')


class Tag:
  '''
  A validated, lowercase, ASCII alphanumeric tag name.
  Classification (self-closing, inline, heading, content) is computed from the static registries in `semantics`.
  '''

  __slots__ = ('_name',)

  _name:str

  def __init__(self, name:str) -> None:
    self.set(name)


  @classmethod
  def from_value(cls, value:Any, fallback:str|None='div') -> 'Tag':
    '''
    Create a `Tag` from an existing `Tag` (returned unchanged), a tag name, or a raw markup snippet like '<div class=...'.
    A snippet is scanned from its first `<` up to the first ':', '-', space or '>'.
    If no name can be obtained, `fallback` is used; without a fallback this raises `InvalidTagName`.
    '''
    if isinstance(value, Tag): return value

    if not is_stringable(value):
      log.warning('Tag.from_value: expected a stringable value; received %s; using fallback: %r',
        type(value).__name__, fallback)
      if not fallback: raise InvalidTagName(f'no tag name can be derived from value: {value!r}')
      return cls(fallback)

    string = as_str(value)
    if string.isascii() and string.isalpha(): return cls(string)

    open_pos = string.find('<')
    if open_pos >= 0:
      end = min(len(string), open_pos + _tag_scan_limit)
      chars:list[str] = []
      for c in string[open_pos:end]:
        if c in _tag_scan_stops: break
        chars.append(c)
      string = ''.join(chars).strip(' <')

    if not string:
      if not fallback: raise InvalidTagName(f'no tag name can be derived from value: {value!r}')
      string = fallback
    return cls(string)


  def __repr__(self) -> str: return f'{type(self).__name__}({self._name!r})'

  def __str__(self) -> str: return self._name

  def __eq__(self, other:Any) -> bool:
    if isinstance(other, Tag): return self._name == other._name
    if isinstance(other, str): return self._name == other.lower()
    return NotImplemented

  __hash__ = None # type: ignore[assignment] # Mutable via `set`.

  def __call__(self, name:str) -> Self: return self.set(name)


  def set(self, name:str) -> Self:
    'Set the tag name. Raises `InvalidTagName` unless the lowercased name is non-empty and ASCII alphanumeric.'
    name = name.lower()
    if not (name and name.isascii() and name.isalnum()):
      raise InvalidTagName(f'invalid tag name: {name!r}; only ASCII letters and digits are allowed.')
    self._name = name
    return self


  @property
  def name(self) -> str: return self._name


  def is_(self, name:str) -> bool:
    return self._name == name.lower()


  @property
  def is_valid_tag(self) -> bool: return is_valid_tag(self._name)

  @property
  def is_content(self) -> bool: return is_content(self._name)

  @property
  def is_heading(self) -> bool: return is_heading(self._name)

  @property
  def is_inline(self) -> bool: return is_inline(self._name)

  @property
  def is_self_closing(self) -> bool: return is_self_closing(self._name)


  def opening_tag(self, attrs:Attributes|Mapping[str,Any]|None=None) -> str:
    if attrs is None: return f'<{self._name}>'
    if not isinstance(attrs, Attributes): attrs = Attributes(attrs)
    return f'<{self._name}{attrs}>'


  def closing_tag(self) -> str|None:
    'Return the closing tag, or None for self-closing (void) tags.'
    if self._name in semantics.self_closing_tags: return None
    return f'</{self._name}>'


def _lower_name(name:'str|Tag|None') -> str:
  return str(name).lower() if name else ''


def is_valid_tag(name:'str|Tag|None') -> bool:
  'Whether or not `name` is a known HTML tag.'
  return _lower_name(name) in semantics.valid_tags

def is_content(name:'str|Tag|None') -> bool:
  'Whether or not `name` is a heading, an inline tag, or `p`.'
  return _lower_name(name) in semantics.content_model_tags

def is_heading(name:'str|Tag|None') -> bool:
  return _lower_name(name) in semantics.heading_tags

def is_inline(name:'str|Tag|None') -> bool:
  return _lower_name(name) in semantics.inline_tags

def is_self_closing(name:'str|Tag|None') -> bool:
  return _lower_name(name) in semantics.self_closing_tags
