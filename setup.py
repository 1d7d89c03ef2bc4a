# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='elemental',
  version='0.0.1',
  url='https://github.com/gwk/elemental',
  description='Elemental builds HTML elements with normalized attributes, classes and styles in Python 3.',

  packages=['elemental'],
  python_requires='>=3.11',
  install_requires=[],
  extras_require={
    'test': ['pytest', 'lxml'],
  },
)
