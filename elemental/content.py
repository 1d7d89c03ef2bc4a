# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Content` is the ordered child sequence of an element.
'''

from enum import Enum
from itertools import count
from typing import Any, Iterable, Iterator, Self

from .exceptions import InvalidAttrValue
from .strings import as_str, is_stringable, normalize_ws, strip_tags


ContentItem = Any # `str` or a stringable object such as a nested `Element`.

# Slot keys are ints for positional items and strs for user-named slots.
ContentKey = int|str


class Content:
  '''
  An ordered sequence of renderable items.
  Positional items and named slots share one ordering, so a named slot can be replaced without moving it.
  Numbers are converted to strings on insertion; other stringable objects (e.g. nested elements) are kept as is
  and converted to strings when the owning element renders. `None` items are ignored.
  '''

  __slots__ = ('_items', '_keys')

  def __init__(self, *items:Any) -> None:
    self._items:dict[ContentKey,ContentItem] = {}
    self._keys = count()
    self.append(*items)


  def __repr__(self) -> str: return f'{type(self).__name__}({self.items()!r})'

  def __str__(self) -> str: return self.get_string('\n')

  def __len__(self) -> int: return len(self._items)

  def __bool__(self) -> bool: return bool(self._items)

  def __iter__(self) -> Iterator[ContentItem]: return iter(self._items.values())


  def append(self, *items:Any) -> Self:
    for item in flatten_content(items):
      self._items[next(self._keys)] = item
    return self


  def prepend(self, *items:Any) -> Self:
    'Insert `items` before the existing items, preserving the order of `items`.'
    new = {next(self._keys): item for item in flatten_content(items)}
    if not new: return self
    existing = list(self._items.items())
    self._items.clear()
    self._items.update(new)
    self._items.update(existing)
    return self


  def set(self, key:str, value:Any) -> Self:
    '''
    Set the named slot `key`. An existing slot is replaced in place; a new slot is appended.
    Setting a slot to None removes it.
    '''
    assert isinstance(key, str), f'named slot keys must be strings; received: {key!r}'
    if value is None:
      self._items.pop(key, None)
      return self
    self._items[key] = content_item(value)
    return self


  def get(self, key:ContentKey) -> ContentItem|None:
    return self._items.get(key)


  def clear(self) -> Self:
    self._items.clear()
    return self


  def items(self) -> list[ContentItem]:
    'The content items in order.'
    return list(self._items.values())


  def get_string(self, separator:str='') -> str:
    return separator.join(str(item) for item in self._items.values())


  def text(self, normalize=True) -> str:
    'Return the text of the content with tags stripped, and (by default) whitespace collapsed.'
    text = strip_tags(self.get_string(' '))
    return normalize_ws(text) if normalize else text


def content_item(value:Any) -> ContentItem:
  'Validate a single content item, converting scalars to strings.'
  if isinstance(value, str): return value
  if not is_stringable(value):
    raise InvalidAttrValue(f'invalid content item of type {type(value).__name__!r}: {value!r}')
  if isinstance(value, (int, float, Enum)) or not _has_own_str(value): return as_str(value)
  return value # Converted when rendered.


def flatten_content(items:Iterable[Any]) -> Iterator[ContentItem]:
  'Yield validated content items, skipping None and flattening nested sequences and `Content` instances.'
  for item in items:
    if item is None: continue
    if isinstance(item, (list, tuple, Content)):
      yield from flatten_content(item)
    else:
      yield content_item(item)


def _has_own_str(value:Any) -> bool:
  return type(value).__str__ is not object.__str__
