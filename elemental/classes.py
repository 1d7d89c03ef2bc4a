# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Classes` is a view over the CSS class tokens of an `Attributes` instance.
'''

import re
from typing import Any, Iterable, Iterator, TYPE_CHECKING

from .exceptions import InvalidClassName
from .strings import as_str

if TYPE_CHECKING:
  from .attributes import Attributes


ClassStorage = dict[str,None] # Insertion-ordered set of class tokens.


class Classes:
  '''
  A by-reference view of the class storage owned by an `Attributes` instance.
  The view never copies: it mutates the owner's dict in place, so changes are visible through both objects.
  Mutating methods return the owning `Attributes` for chaining; they do not create new objects.
  '''

  __slots__ = ('_classes', '_owner')

  def __init__(self, classes:ClassStorage, owner:'Attributes') -> None:
    self._classes = classes
    self._owner = owner


  def __repr__(self) -> str: return f'{type(self).__name__}({list(self._classes)!r})'

  def __str__(self) -> str: return self.resolve(self._classes)

  def __contains__(self, token:str) -> bool: return token in self._classes

  def __iter__(self) -> Iterator[str]: return iter(self._classes)

  def __len__(self) -> int: return len(self._classes)


  def add(self, *tokens:Any, prepend=False, append=False) -> 'Attributes':
    '''
    Add class tokens.
    Each argument may be a string of whitespace or comma separated tokens, a stringable value, or a sequence of these.
    `None` and `False` are ignored.
    By default new tokens are appended and existing tokens keep their position.
    `prepend` moves the tokens to the front; `append` moves them to the end.
    All tokens are validated before the storage is touched, so an invalid token leaves the existing classes unchanged.
    '''
    normalized = list(dict.fromkeys(normalize_class_tokens(tokens)))
    if not normalized: return self._owner
    self._owner._touch('classes', self._classes)
    classes = self._classes
    if prepend:
      rest = [c for c in classes if c not in normalized]
      classes.clear() # Mutate in place; the owner holds the same dict.
      classes.update(dict.fromkeys(normalized))
      classes.update(dict.fromkeys(rest))
    elif append:
      for token in normalized:
        classes.pop(token, None)
        classes[token] = None
    else:
      for token in normalized:
        classes.setdefault(token)
    return self._owner


  def remove(self, *tokens:str) -> 'Attributes':
    for token in tokens:
      self._classes.pop(token.strip().lower(), None)
    return self._owner


  def clear(self) -> 'Attributes':
    self._classes.clear()
    return self._owner


  def has(self, token:str) -> bool:
    return token.strip().lower() in self._classes


  def get(self, token:str) -> str|None:
    token = token.strip().lower()
    return token if token in self._classes else None


  def get_all(self) -> list[str]:
    'The class tokens in insertion order.'
    return list(self._classes)


  @staticmethod
  def resolve(tokens:Iterable[str]) -> str:
    'Join non-empty tokens with single spaces, preserving their order.'
    return ' '.join(filter(None, tokens))


def normalize_class_tokens(tokens:Iterable[Any]) -> Iterator[str]:
  '''
  Yield normalized class tokens from a heterogeneous (possibly nested) collection of values.
  Raises `InvalidClassName` for a token that starts with a digit.
  '''
  for value in tokens:
    if value is None or value is False: continue
    if isinstance(value, (list, tuple, set, frozenset, Classes)):
      yield from normalize_class_tokens(value)
      continue
    for token in _class_sep_re.split(as_str(value).strip().lower()):
      if not token: continue
      if token[0].isdecimal():
        raise InvalidClassName(f'CSS class selectors cannot start with a number: {token!r}')
      yield token


_class_sep_re = re.compile(r'[\s,]+')
