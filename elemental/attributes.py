# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Attributes` holds the normalized attribute set of an element: `id`, class tokens, style declarations,
and any other boolean or string valued attributes.
'''

import logging
import re
from html import unescape as _unescape
from typing import Any, Iterable, Iterator, Mapping, Self

from .classes import Classes, ClassStorage, normalize_class_tokens
from .exceptions import InvalidAttrName, InvalidAttrValue, UndefinedView
from .strings import as_str, attr_val, escape_attr, slugify
from .styles import parse_styles, Styles, StyleStorage


log = logging.getLogger(__name__)


# Attribute values stored in the table. `id` and plain attributes are `str` or `bool`;
# `classes` and `styles` hold the storage dicts that the `Classes` and `Styles` views alias.
AttrStored = bool|str|ClassStorage|StyleStorage

# Internal names of the special attributes, and the names they render with.
render_names = {
  'classes': 'class',
  'styles': 'style',
}


def attr_name(raw:str) -> str:
  '''
  Normalize an attribute name: strip, lowercase, replace runs of characters other than `[a-z0-9-]` with '-',
  and strip leading and trailing hyphens. `class` and `style` map to the internal names `classes` and `styles`.
  Keyword spellings therefore work as expected: `class_` -> 'classes', `data_id` -> 'data-id', `for_` -> 'for'.
  '''
  assert isinstance(raw, str), f'attribute names must be strings; received: {raw!r}'
  name = _attr_name_invalid_re.sub('-', raw.strip().lower()).strip('-')
  if not name: raise InvalidAttrName(f'attribute name is empty after normalization: {raw!r}')
  if name == 'class': return 'classes'
  if name == 'style': return 'styles'
  return name

_attr_name_invalid_re = re.compile(r'[^a-z0-9-]+')


class Attributes:
  '''
  A mutable, normalized attribute set.

  Attributes render in the order in which each was first set.
  `True` renders as a bare attribute name, `False` suppresses the attribute,
  and empty class or style collections never render.

  The `Classes` and `Styles` views returned by `class_view` and `style_view` alias this object's storage;
  mutating methods on either side are immediately visible on the other.
  Obtaining a view does not affect render order; `class` and `style` take their position from the first value added.
  Mutating methods return `self` for chaining; they modify this instance rather than returning a copy.
  '''

  __slots__ = ('_attrs', '_classes', '_styles')

  def __init__(self, *attrs:Any, **kw_attrs:Any) -> None:
    self._classes:ClassStorage = {}
    self._styles:StyleStorage = {}
    self._attrs:dict[str,AttrStored] = {}
    self.merge(*attrs, **kw_attrs)


  def __repr__(self) -> str: return f'{type(self).__name__}({self.to_map()!r})'

  def __str__(self) -> str:
    'Return the resolved attributes with a single leading space, or the empty string if there are none.'
    resolved = ' '.join(self.resolve_attributes().values())
    return f' {resolved}' if resolved else ''

  def __eq__(self, other:Any) -> bool:
    if not isinstance(other, Attributes): return NotImplemented
    return self.resolve_attributes(raw=True) == other.resolve_attributes(raw=True)

  __hash__ = None # type: ignore[assignment] # Mutable.

  def __iter__(self) -> Iterator[tuple[str,bool|str]]:
    return iter(self.resolve_attributes(raw=True).items())


  # Mutation.

  def merge(self, *attrs:Any, **kw_attrs:Any) -> Self:
    '''
    Merge attributes from other `Attributes` instances, mappings, or sequences of these, then from `kw_attrs`.
    `None` values are ignored: merging never removes an attribute.
    Classes and styles accumulate; `id` and other attributes take the incoming value.
    '''
    for name, value in self._parse(attrs):
      self._merge_attr(name, value)
    for key, value in kw_attrs.items():
      self._merge_attr(attr_name(key), value)
    return self


  def set(self, name:str, value:Any) -> Self:
    '''
    Set a single attribute, replacing any existing value.
    Unlike `merge`, `classes` and `styles` are replaced rather than accumulated, and `None` removes the attribute.
    Classes and styles are parsed before the existing values are dropped, so an invalid value leaves them unchanged.
    '''
    name = attr_name(name)
    if name == 'classes':
      tokens = list(dict.fromkeys(normalize_class_tokens([value])))
      self._classes.clear()
      self.add_class(tokens)
    elif name == 'styles':
      parsed = parse_styles(value)
      self._styles.clear()
      self.add_style(parsed)
    elif value is None:
      self._attrs.pop(name, None)
    else:
      self._merge_attr(name, value)
    return self


  def id(self, value:Any) -> Self:
    'Set the `id` attribute to the slug of `value`; a falsy value or an empty slug removes it.'
    slug = slugify(as_str(value)) if value else ''
    if slug: self._attrs['id'] = slug
    else: self._attrs.pop('id', None)
    return self


  def add_class(self, *tokens:Any, prepend=False, append=False) -> Self:
    self.class_view().add(*tokens, prepend=prepend, append=append)
    return self


  def add_style(self, *declarations:Any, prepend=False, append=False) -> Self:
    self.style_view().add(*declarations, prepend=prepend, append=append)
    return self


  def pull(self, name:str) -> str|None:
    'Return the resolved value of an attribute and then reset it.'
    name = attr_name(name)
    value = self.get(name)
    if name == 'classes': self._classes.clear()
    elif name == 'styles': self._styles.clear()
    else: self._attrs.pop(name, None)
    return value


  # Access.

  @property
  def id_value(self) -> str|None:
    v = self._attrs.get('id')
    assert v is None or isinstance(v, str)
    return v


  def get(self, name:str) -> str|None:
    '''
    Return the resolved string form of an attribute, or None if it is not set.
    Classes and styles are resolved; booleans are returned as 'true' or 'false'. Use `get_raw` to obtain booleans.
    '''
    value = self.get_raw(name)
    if value is None: return None
    if isinstance(value, bool): return 'true' if value else 'false'
    return value


  def get_raw(self, name:str) -> bool|str|None:
    'Return the unformatted value of an attribute: a `bool`, a `str`, or None if it is not set.'
    name = attr_name(name)
    if name == 'classes': return Classes.resolve(self._classes) or None
    if name == 'styles': return Styles.resolve(self._styles) or None
    value = self._attrs.get(name)
    assert value is None or isinstance(value, (bool, str)), value
    return value


  def has(self, name:str, value:Any=None) -> bool:
    '''
    Whether or not an attribute is present (set, not False, and not an empty class or style collection).
    If `value` is given, also test it: class token membership, style declaration equality, or string equality.
    '''
    name = attr_name(name)
    if name == 'classes':
      return bool(self._classes) if value is None else (as_str(value).strip().lower() in self._classes)
    if name == 'styles':
      if value is None: return bool(self._styles)
      parsed = Styles.parse(value)
      return bool(parsed) and all(self._styles.get(k) == v for k, v in parsed.items())
    existing = self._attrs.get(name)
    if existing is None or existing is False: return False
    if value is None: return True
    return existing == attr_val(value)


  def class_view(self) -> Classes:
    'Return a `Classes` view that aliases this object\'s class storage.'
    return Classes(self._classes, self)


  def style_view(self) -> Styles:
    'Return a `Styles` view that aliases this object\'s style storage.'
    return Styles(self._styles, self)


  def view(self, name:str) -> Classes|Styles|dict[str,Any]:
    'Look up a view by name: "class", "style", or "map". Raises `UndefinedView` for any other name.'
    match name.strip().lower():
      case 'class'|'classes': return self.class_view()
      case 'style'|'styles': return self.style_view()
      case 'array'|'map': return self.to_map()
      case _: raise UndefinedView(name)


  def to_map(self) -> dict[str,Any]:
    '''
    Return a normalized but unresolved copy of the attribute table, keyed by internal names.
    `id` is always present (possibly None); `classes` is a list and `styles` is a dict.
    '''
    m:dict[str,Any] = {'id': self._attrs.get('id'), 'classes': list(self._classes), 'styles': dict(self._styles)}
    for name, value in self._attrs.items():
      if name not in m: m[name] = value
    return m


  def resolve_attributes(self, raw=False) -> dict[str,bool|str]:
    '''
    Return the render-ready attribute table, keyed by render names (`class`, `style`).
    Attributes set to `False` and empty classes or styles are skipped.
    If `raw` is True, the values are the resolved values (`True` is kept as is);
    otherwise `True` becomes the bare attribute name and other values become `name="value"` with the value escaped.
    '''
    resolved:dict[str,bool|str] = {}
    for name, value in self._attrs.items():
      if value is False: continue
      if name == 'classes': value = Classes.resolve(self._classes)
      elif name == 'styles': value = Styles.resolve(self._styles)
      if value == '' and name in render_names: continue
      assert isinstance(value, (bool, str)), value
      key = render_names.get(name, name)
      if raw: resolved[key] = value
      elif value is True: resolved[key] = key
      else: resolved[key] = f'{key}="{escape_attr(value)}"'
    return resolved


  # Extraction.

  @classmethod
  def extract(cls, html:str) -> 'Attributes':
    '''
    Extract the attributes of the first element of an HTML string.
    Only the opening tag at the start of the string is inspected; anything that does not match yields empty attributes.
    This is a permissive regex scrape, not a parser.
    '''
    return cls._extract(html)[0]


  @classmethod
  def unwrap(cls, html:str) -> tuple['Attributes',str]:
    '''
    Like `extract`, but also return `html` with the opening tag removed,
    along with a matching closing tag if the string ends with one, and then stripped.
    If no opening tag matches, the string is returned unchanged.
    '''
    return cls._extract(html)


  @classmethod
  def _extract(cls, html:str) -> tuple['Attributes',str]:
    m = _opening_tag_re.match(html)
    if m is None: return cls(), html
    tag, attrs_str = m.group(1, 2)
    inner = html[m.end():]
    closing = f'</{tag}>'
    if inner.endswith(closing): inner = inner[:-len(closing)]
    inner = inner.strip()
    attrs:dict[str,bool|str] = {}
    for am in _attr_re.finditer(attrs_str):
      name, _quote, value, unquoted_name, unquoted_value, bare = am.groups()
      if name: attrs[name] = _unescape(value)
      elif unquoted_name: attrs[unquoted_name] = _unescape(unquoted_value)
      elif bare: attrs[bare] = True
    return cls(attrs), inner


  # Helpers.

  def _touch(self, name:str, storage:AttrStored) -> None:
    'Record the position of a special attribute in the render order the first time a value is added to it.'
    self._attrs.setdefault(name, storage)


  def _merge_attr(self, name:str, value:Any) -> None:
    if value is None:
      log.debug('ignoring None value for attribute %r', name)
      return
    if name == 'classes':
      self.add_class(value)
    elif name == 'styles':
      self.add_style(value)
    elif name == 'id':
      self.id(value)
    else:
      self._attrs[name] = attr_val(value)


  def _parse(self, attrs:Iterable[Any]) -> Iterator[tuple[str,Any]]:
    'Flatten positional attribute arguments into (normalized name, value) pairs.'
    for a in attrs:
      if a is None: continue
      if isinstance(a, Attributes):
        yield from a._items_for_merge()
      elif isinstance(a, Mapping):
        for k, v in a.items():
          yield attr_name(k), v
      elif isinstance(a, (list, tuple)):
        yield from self._parse(a)
      else:
        raise InvalidAttrValue(f'expected Attributes, a mapping, or a sequence of these; received: {a!r}')


  def _items_for_merge(self) -> Iterator[tuple[str,Any]]:
    for name, value in self._attrs.items():
      if name == 'classes': yield name, list(self._classes)
      elif name == 'styles': yield name, dict(self._styles)
      else: yield name, value


# Matches the opening tag at the start of the string: group 1 is the tag name and group 2 the attribute text.
_opening_tag_re = re.compile(r'\s*<(\w+)([^>]*)>')

# Matches a quoted `name="value"` pair (double, single, or backtick quotes), an unquoted `name=value` pair,
# or a bare boolean attribute name.
_attr_re = re.compile(r'''([-\w:.]+)\s*=\s*(["'`])(.*?)\2|([-\w:.]+)\s*=\s*([^\s"'`=<>]+)|([-\w:.]+)''', re.DOTALL)
