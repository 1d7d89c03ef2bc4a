# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tests for `elemental.strings`.
Plain pytest functions with bare asserts and `pytest.raises`, in place of a `utest`/`utest_exc` script,
since `utest` is not installable on its own. Run with `pytest` from the repository root.
'''

from enum import Enum, IntEnum, StrEnum

import pytest

from elemental import InvalidAttrValue
from elemental.strings import as_str, attr_val, escape_attr, escape_url, is_stringable, normalize_ws, slugify, strip_tags


class Variant(StrEnum):
  PRIMARY = 'Primary'

class Level(IntEnum):
  HIGH = 2

class Color(Enum):
  RED = 1


class Label:
  def __str__(self) -> str: return 'label'

class Markup:
  def __html__(self) -> str: return '<b>x</b>'


@pytest.mark.parametrize('raw, expected', [
  ('Hello World!', 'hello-world'),
  ('Über Café', 'uber-cafe'),
  ('--a__b--', 'a-b'),
  ('   ', ''),
])
def test_slugify(raw:str, expected:str) -> None:
  assert slugify(raw) == expected


def test_as_str() -> None:
  assert as_str('x') == 'x'
  assert as_str(Variant.PRIMARY) == 'Primary'
  assert as_str(Level.HIGH) == '2'
  assert as_str(Color.RED) == 'RED'
  assert as_str(2.0) == '2'
  assert as_str(2.5) == '2.5'
  assert as_str(7) == '7'
  assert as_str(Label()) == 'label'
  assert as_str(Markup()) == '<b>x</b>'


@pytest.mark.parametrize('value', [None, True, False, object(), [1, 2]])
def test_as_str_rejects(value:object) -> None:
  with pytest.raises(InvalidAttrValue):
    as_str(value)


def test_attr_val() -> None:
  assert attr_val(None) is None
  assert attr_val(True) is True
  assert attr_val(False) is False
  assert attr_val(3) == '3'


def test_is_stringable() -> None:
  assert is_stringable('x')
  assert is_stringable(1)
  assert is_stringable(Color.RED)
  assert is_stringable(Label())
  assert is_stringable(Markup())
  assert not is_stringable(True)
  assert not is_stringable(None)
  assert not is_stringable(object())


def test_escape_url() -> None:
  assert escape_url('/a b.png') == '/a%20b.png'
  assert escape_url('/x?a=1&b=2#top') == '/x?a=1&b=2#top'
  assert escape_url('/already%20escaped') == '/already%20escaped'


def test_escape_attr() -> None:
  assert escape_attr('a "b" & <c>') == 'a &quot;b&quot; &amp; &lt;c&gt;'


def test_text_helpers() -> None:
  assert strip_tags('<p>Hi <b>there</b></p>') == 'Hi there'
  assert normalize_ws('  a \n\t b  ') == 'a b'
