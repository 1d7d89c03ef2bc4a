# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tests for `elemental.styles`.
Plain pytest functions with bare asserts and `pytest.raises`, in place of a `utest`/`utest_exc` script,
since `utest` is not installable on its own. Run with `pytest` from the repository root.
'''

import pytest

from elemental import Attributes, InvalidStyleName, parse_styles, Styles


def test_parse_declaration_string() -> None:
  parsed = parse_styles('color: red; margin: 0')
  assert parsed == {'color': 'red', 'margin': '0'}
  assert list(parsed) == ['color', 'margin']
  assert parse_styles('color:red') == {'color': 'red'}
  assert Styles.parse('color: red;') == {'color': 'red'}


def test_parse_keeps_parenthesized_semicolons() -> None:
  parsed = parse_styles('width: calc(1px + 2px); background: url(a;b)')
  assert parsed == {'width': 'calc(1px + 2px)', 'background': 'url(a;b)'}


def test_parse_mapping_and_sequence() -> None:
  assert parse_styles({'font_size': '12px', 'color': None}) == {'font-size': '12px'}
  assert parse_styles(['color: red', 'margin:0;', None, {'padding': 4}]) == {'color': 'red', 'margin': '0', 'padding': '4'}


def test_parse_drops_empty_values() -> None:
  assert parse_styles('color: ; margin: 0') == {'margin': '0'}
  assert parse_styles('') == {}
  assert parse_styles(None) == {}


@pytest.mark.parametrize('bad', ['1x: y', 'color red', ': red', {'2d': 'x'}])
def test_parse_rejects(bad:object) -> None:
  with pytest.raises(InvalidStyleName):
    parse_styles(bad)


def test_resolve() -> None:
  assert Styles.resolve({'color': 'red', 'margin': '0'}) == 'color: red; margin: 0'
  assert Styles.resolve({}) == ''


def test_add_positions() -> None:
  a = Attributes(style='color: red; margin: 0')
  a.add_style('color: blue')
  assert a.get('style') == 'color: blue; margin: 0'
  a.add_style('padding: 1px', prepend=True)
  assert a.get('style') == 'padding: 1px; color: blue; margin: 0'
  a.add_style('padding: 2px', append=True)
  assert a.get('style') == 'color: blue; margin: 0; padding: 2px'


def test_add_is_atomic() -> None:
  a = Attributes(style='color: red')
  with pytest.raises(InvalidStyleName):
    a.add_style('margin: 0; 9lives: yes')
  assert a.get('style') == 'color: red'


def test_set_is_atomic() -> None:
  a = Attributes(style='color: red')
  with pytest.raises(InvalidStyleName):
    a.set('style', 'margin: 0; 9lives: yes')
  assert a.get('style') == 'color: red'
  a.set('style', {'margin': 0})
  assert a.get('style') == 'margin: 0'


def test_view_aliases_owner() -> None:
  a = Attributes()
  view = a.style_view()
  assert view.add({'font_weight': 'bold'}) is a
  assert a.get('style') == 'font-weight: bold'
  a.add_style('color: red')
  assert 'color' in view
  assert view.get_all() == {'font-weight': 'bold', 'color': 'red'}
  assert str(view) == 'font-weight: bold; color: red'


def test_has_remove_clear() -> None:
  a = Attributes(style={'color': 'red', 'font-size': '2em'})
  view = a.style_view()
  assert view.has('color')
  assert view.has('color', ' red; ')
  assert not view.has('color', 'blue')
  assert not view.has('margin')
  assert view.get('font_size') == '2em'
  assert view.remove('font_size') is a
  assert a.get('style') == 'color: red'
  view.clear()
  assert a.get('style') is None
  assert str(a) == ''
