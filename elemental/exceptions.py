# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised by the element model.
Validation errors subclass `ValueError`; unsupported value types subclass `TypeError`;
requests for undefined attribute views subclass `KeyError`.
All of them also derive from `ElementalError` so that callers can catch the package's errors as a group.
'''


class ElementalError(Exception):
  'Base class for all errors raised by this package.'


class InvalidTagName(ElementalError, ValueError):
  'Raised when a tag name is empty or not ASCII alphanumeric.'


class InvalidAttrName(ElementalError, ValueError):
  'Raised when an attribute name normalizes to the empty string.'


class InvalidClassName(ElementalError, ValueError):
  'Raised when a CSS class token is not a valid class selector.'


class InvalidStyleName(ElementalError, ValueError):
  'Raised when a CSS declaration has an invalid or missing property name.'


class InvalidAttrValue(ElementalError, TypeError):
  'Raised when a value of an unsupported type is given for an attribute, class, style or content item.'


class UndefinedView(ElementalError, KeyError):
  '''
  Raised when an attribute view is requested by an unknown name.
  Since it arises from a name lookup, it subclasses KeyError.
  '''
  def __init__(self, name:str) -> None:
    self.name = name
    super().__init__(name)
