# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import pytest

from elemental import Attributes


@pytest.fixture
def link_attrs() -> Attributes:
  return Attributes({'href': '/x', 'class': 'btn primary'})
