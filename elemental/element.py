# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Element` composes a `Tag`, an `Attributes` set and a `Content` sequence, and renders them to HTML.
'''

from typing import Any, Iterable, Self

from .attributes import Attributes
from .content import Content
from .strings import escape_url
from .tag import Tag


class Element:
  '''
  An HTML element that renders to a string on demand.

  The rendered string is cached by `render`.
  Mutating the element (`set_tag`, `attributes`, `content`, or the `tag`, `attrs` and `children` members directly)
  does not invalidate the cache; call `render(rebuild=True)` to see the changes.

  `Element('a', 'Click', href='/x', class_='btn primary')` renders as `<a href="/x" class="btn primary">Click</a>`.
  Attributes render in the order in which they were first set.
  '''

  __slots__ = ('tag', 'attrs', 'children', '_html')

  def __init__(self,
   tag:str|Tag='div',
   content:Any=None, # A string, stringable, `Content`, or a (nested) sequence of these.
   *more_attrs:Attributes|dict[str,Any]|None, # Additional `Attributes` or mappings, merged in order.
   attrs:Attributes|dict[str,Any]|None=None,
   cl:str|Iterable[str]|None=None, # Shorthand for the `class` attribute.
   **kw_attrs:Any # Keyword attributes; underscores become hyphens. These are merged last.
   ) -> None:
    self.tag = Tag.from_value(tag)
    self.attrs = Attributes(attrs, *more_attrs)
    if cl is not None: self.attrs.add_class(cl)
    self.attrs.merge(**kw_attrs)
    self.children = Content(content)
    self._html:str|None = None


  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.tag.name!r}, {self.children.items()!r}, attrs={self.attrs.to_map()!r})'

  def __str__(self) -> str: return self.render()

  def __html__(self) -> str:
    'Template engine protocol (e.g. Jinja2 and markupsafe): the rendered element is already-escaped markup.'
    return self.render()


  def get_html(self) -> str:
    return self.render()


  def build(self, separator:str='') -> str:
    'Render the element without consulting the cache.'
    opening = self.tag.opening_tag(self.attrs)
    closing = self.tag.closing_tag()
    if closing is None: return opening # Self-closing tags have no content.
    return separator.join((opening, *(str(c) for c in self.children), closing))


  def render(self, rebuild=False, separator:str='') -> str:
    '''
    Return the rendered HTML, computing it on the first call and caching it thereafter.
    If `rebuild` is True, discard the cached string first.
    '''
    if rebuild: self._html = None
    if self._html is None:
      self._html = self.build(separator)
    return self._html


  def set_tag(self, name:str) -> Self:
    'Change the tag name in place. This does not invalidate the render cache.'
    self.tag.set(name)
    return self


  def attributes(self, id:Any=None, cl:Any=None, style:Any=None, **add:Any) -> Self:
    'Merge attributes given as keywords. Underscores in keyword names become hyphens.'
    self.attrs.merge(add, {'id': id, 'class': cl, 'style': style})
    return self


  def content(self, value:Any, prepend=False) -> Self:
    'Append (or prepend) one or more content items. None is ignored.'
    if value is None: return self
    if prepend: self.children.prepend(value)
    else: self.children.append(value)
    return self


  def has_content(self) -> bool:
    return bool(self.children)


  # Convenience constructors.

  @classmethod
  def link(cls, href:str, *attrs:Attributes|dict[str,Any]|None, **kw_attrs:Any) -> 'Element':
    kw_attrs['href'] = escape_url(href)
    return cls('link', None, *attrs, **kw_attrs)


  @classmethod
  def script(cls, src:str|None=None, inline:str|None=None, *attrs:Attributes|dict[str,Any]|None, **kw_attrs:Any) \
   -> 'Element':
    'Create a script element, either referencing `src` or containing `inline` code; `inline` takes precedence.'
    kw_attrs.pop('src', None)
    if src and not inline:
      kw_attrs['src'] = escape_url(src)
    return cls('script', inline, *attrs, **kw_attrs)


  @classmethod
  def stylesheet(cls, href:str|None=None, inline:str|None=None, *attrs:Attributes|dict[str,Any]|None,
   **kw_attrs:Any) -> 'Element':
    '''
    Create a `link rel="stylesheet"` element for `href`, or a `style` element containing `inline` CSS.
    Raises ValueError if neither is provided.
    '''
    kw_attrs.pop('href', None)
    if href and not inline:
      kw_attrs['href'] = escape_url(href)
      kw_attrs['rel'] = 'stylesheet'
      return cls('link', None, *attrs, **kw_attrs)
    if inline:
      return cls('style', inline, *attrs, **kw_attrs)
    raise ValueError('stylesheet requires either `href` or `inline`.')


  @classmethod
  def img(cls, src:str, alt:str='', srcset:str|Iterable[str]|None=None, sizes:str|Iterable[str]|None=None,
   *attrs:Attributes|dict[str,Any]|None, **kw_attrs:Any) -> 'Element':
    kw_attrs['src'] = escape_url(src)
    kw_attrs['alt'] = alt
    if srcset: kw_attrs['srcset'] = _join_list(srcset)
    if sizes: kw_attrs['sizes'] = _join_list(sizes)
    return cls('img', None, *attrs, **kw_attrs)


  @classmethod
  def source(cls, src:str|None=None, srcset:str|None=None, media:str|None=None, type:str|None=None,
   sizes:str|Iterable[str]|None=None, *attrs:Attributes|dict[str,Any]|None, **kw_attrs:Any) -> 'Element':
    if media: kw_attrs['media'] = media
    if src: kw_attrs['src'] = escape_url(src)
    if srcset: kw_attrs['srcset'] = escape_url(srcset)
    if type: kw_attrs['type'] = type
    if sizes: kw_attrs['sizes'] = _join_list(sizes)
    return cls('source', None, *attrs, **kw_attrs)


def _join_list(value:str|Iterable[str]) -> str:
  return value if isinstance(value, str) else ', '.join(value)
