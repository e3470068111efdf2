# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['selective_assertions',
 'selective_assertions.fields',
 'selective_assertions.impls']

package_data = \
{'': ['*']}

install_requires = \
['pydantic>=2.0.0,<3.0.0',
 'pydantic-settings>=2.0.0,<3.0.0']

extras_require = \
{'test': ['pytest>=7.0.0',
          'pytest-cov>=4.0.0',
          'nox>=2022.1.7']}

setup_kwargs = {
    'name': 'selective-assertions',
    'version': '0.1.0',
    'description': 'Equality assertions for tests that exclude some fields, or compare only some fields',
    'long_description': None,
    'author': None,
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.10,<4.0',
}


setup(**setup_kwargs)
