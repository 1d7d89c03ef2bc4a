# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Styles` is a view over the inline CSS declarations of an `Attributes` instance.
'''

import re
from typing import Any, Iterable, Iterator, Mapping, TYPE_CHECKING

from .exceptions import InvalidStyleName
from .strings import as_str

if TYPE_CHECKING:
  from .attributes import Attributes


StyleStorage = dict[str,str] # Insertion-ordered map of property names to values.


class Styles:
  '''
  A by-reference view of the style storage owned by an `Attributes` instance.
  Like `Classes`, the view mutates the owner's dict in place and its mutators return the owner.
  '''

  __slots__ = ('_styles', '_owner')

  def __init__(self, styles:StyleStorage, owner:'Attributes') -> None:
    self._styles = styles
    self._owner = owner


  def __repr__(self) -> str: return f'{type(self).__name__}({self._styles!r})'

  def __str__(self) -> str: return self.resolve(self._styles)

  def __contains__(self, name:str) -> bool: return name in self._styles

  def __iter__(self) -> Iterator[str]: return iter(self._styles)

  def __len__(self) -> int: return len(self._styles)


  def add(self, *declarations:Any, prepend=False, append=False) -> 'Attributes':
    '''
    Add CSS declarations, given as declaration strings, mappings, or sequences of these.
    By default a new property is appended and an existing property is updated in place.
    `prepend` moves the properties to the front; `append` moves them to the end.
    All declarations are parsed before the storage is touched.
    '''
    parsed = parse_styles(declarations)
    if not parsed: return self._owner
    self._owner._touch('styles', self._styles)
    styles = self._styles
    if prepend:
      rest = [(k, v) for k, v in styles.items() if k not in parsed]
      styles.clear() # Mutate in place; the owner holds the same dict.
      styles.update(parsed)
      styles.update(rest)
    elif append:
      for name, value in parsed.items():
        styles.pop(name, None)
        styles[name] = value
    else:
      styles.update(parsed)
    return self._owner


  def remove(self, *names:str) -> 'Attributes':
    for name in names:
      self._styles.pop(style_name(name), None)
    return self._owner


  def clear(self) -> 'Attributes':
    self._styles.clear()
    return self._owner


  def has(self, name:str, value:str|None=None) -> bool:
    '''
    Whether or not the property `name` is set.
    If `value` is given, the stored value must also equal it, ignoring surrounding whitespace and semicolons.
    '''
    existing = self._styles.get(style_name(name))
    if value:
      return value.strip(_value_strip_chars) == existing
    return bool(existing)


  def get(self, name:str) -> str|None:
    return self._styles.get(style_name(name))


  def get_all(self) -> dict[str,str]:
    'A copy of the declarations in insertion order.'
    return dict(self._styles)


  @staticmethod
  def resolve(styles:Mapping[str,str]) -> str:
    'Render declarations as `name: value` pairs joined by "; ", preserving their order.'
    return '; '.join(f'{k}: {v}' for k, v in styles.items() if v)


  @staticmethod
  def parse(declarations:Any) -> dict[str,str]:
    return parse_styles(declarations)


def parse_styles(declarations:Any, styles:dict[str,str]|None=None) -> dict[str,str]:
  '''
  Parse CSS declarations into an ordered name-to-value dict, merging into `styles` if it is provided.
  Accepted inputs:
  * a string such as "color: red; margin: 0"; semicolons inside parentheses do not split declarations;
  * a mapping of names to values;
  * `None` (ignored);
  * a sequence of any of the above.
  Raises `InvalidStyleName` for a declaration with no name, a name that starts with a digit,
  or a positional declaration that lacks the `:` separator.
  '''
  if styles is None: styles = {}
  if declarations is None: return styles
  if isinstance(declarations, str):
    _parse_positional(_style_split_re.split(declarations.strip()), styles)
  elif isinstance(declarations, Mapping):
    for name, value in declarations.items():
      if value is None: continue
      _add_declaration(as_str(name), as_str(value), styles)
  elif isinstance(declarations, (list, tuple)):
    for d in declarations:
      parse_styles(d, styles)
  else:
    _parse_positional([as_str(declarations)], styles)
  return styles


def _parse_positional(entries:Iterable[str], styles:dict[str,str]) -> None:
  for entry in entries:
    entry = entry.strip(_entry_strip_chars)
    if not entry: continue
    name, colon, value = entry.partition(':')
    if not colon:
      raise InvalidStyleName(f'unable to parse style {entry!r}: the `:` separator appears to be missing.')
    _add_declaration(name, value, styles)


def _add_declaration(name:str, value:str, styles:dict[str,str]) -> None:
  name = style_name(name)
  value = value.strip(_value_strip_chars)
  if not name:
    raise InvalidStyleName(f'CSS style declaration is missing a name; value: {value!r}')
  if name[0].isdecimal():
    raise InvalidStyleName(f'CSS style names cannot start with a number: {name!r}')
  if not value:
    styles.pop(name, None) # An empty value drops any previous value parsed in the same call.
    return
  styles[name] = value


def style_name(name:str) -> str:
  'Normalize a CSS property name: trim separator noise and fold underscores to hyphens.'
  return name.strip(_name_strip_chars).replace('_', '-')


_entry_strip_chars = ' \n\r\t\v\0,'
_name_strip_chars = ' \n\r\t\v\0,:'
_value_strip_chars = ' \n\r\t\v\0,;'

# Split on semicolons that are not inside parentheses, e.g. `calc(1px + 2px)` or `url(a;b)`.
_style_split_re = re.compile(r';\s*(?![^(]*\))')
