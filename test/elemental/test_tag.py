# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tests for `elemental.tag`.
Plain pytest functions with bare asserts and `pytest.raises`, in place of a `utest`/`utest_exc` script,
since `utest` is not installable on its own. Run with `pytest` from the repository root.
'''

import logging

import pytest

from elemental import Attributes, InvalidTagName, is_content, is_heading, is_inline, is_self_closing, is_valid_tag, Tag
from elemental.semantics import self_closing_tags


@pytest.mark.parametrize('name', ['DIV', 'Span', 'h1', 'x1', 'custom'])
def test_opening_tag_without_attributes(name:str) -> None:
  assert Tag.from_value(name).opening_tag(Attributes()) == f'<{name.lower()}>'
  assert Tag(name).opening_tag() == f'<{name.lower()}>'


@pytest.mark.parametrize('name', sorted(self_closing_tags))
def test_self_closing_has_no_closing_tag(name:str) -> None:
  assert Tag(name).closing_tag() is None


@pytest.mark.parametrize('name', ['div', 'p', 'span', 'h2', 'script'])
def test_closing_tag(name:str) -> None:
  assert Tag(name).closing_tag() == f'</{name}>'


@pytest.mark.parametrize('bad', ['', 'my-tag', 'a b', 'ül', '<div>'])
def test_invalid_names(bad:str) -> None:
  with pytest.raises(InvalidTagName):
    Tag(bad)


def test_set() -> None:
  t = Tag('div')
  assert t.set('SECTION') is t
  assert t.name == 'section'
  assert t('P') is t
  assert str(t) == 'p'
  assert t == 'P'
  assert t.is_('p')
  with pytest.raises(ValueError):
    t.set('bad-name')
  assert t.name == 'p'


def test_from_value() -> None:
  t = Tag('span')
  assert Tag.from_value(t) is t
  assert Tag.from_value('h2').name == 'h2'
  assert Tag.from_value('<h1 class="title">Hi</h1>').name == 'h1'
  assert Tag.from_value('text before <section>').name == 'section'
  assert Tag.from_value('<nav-bar>').name == 'nav'
  assert Tag.from_value('').name == 'div'
  assert Tag.from_value('<>', fallback='p').name == 'p'
  with pytest.raises(InvalidTagName):
    Tag.from_value('', fallback=None)
  with pytest.raises(InvalidTagName):
    Tag.from_value('my-tag')


def test_from_value_non_stringable(caplog:pytest.LogCaptureFixture) -> None:
  with caplog.at_level(logging.WARNING, logger='elemental.tag'):
    assert Tag.from_value(None).name == 'div'
  assert any(r.levelno == logging.WARNING for r in caplog.records)
  with pytest.raises(InvalidTagName):
    Tag.from_value(object(), fallback='')


def test_classification() -> None:
  assert is_content('p')
  assert is_content('H1')
  assert is_content('span')
  assert not is_content('div')
  assert is_heading('h3')
  assert not is_heading('p')
  assert is_inline('a')
  assert not is_inline('div')
  assert is_self_closing('br')
  assert not is_self_closing('div')
  assert is_valid_tag('img')
  assert is_valid_tag('div')
  assert not is_valid_tag('blink')
  assert not is_valid_tag(None)
  assert not is_valid_tag('')
  t = Tag('h4')
  assert t.is_heading and t.is_content and t.is_valid_tag
  assert not t.is_inline and not t.is_self_closing
  assert Tag('img').is_self_closing
  assert is_self_closing(Tag('hr'))


def test_opening_tag_with_attributes() -> None:
  assert Tag('a').opening_tag({'href': '/x'}) == '<a href="/x">'
  assert Tag('input').opening_tag(Attributes(type='checkbox', checked=True)) == '<input type="checkbox" checked>'
