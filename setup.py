#!/usr/bin/env python

from setuptools import setup

setup(name='python-solrquery',
      version='0.1',
      description='Python client API for Solr',
      packages=['solrquery', 'solrquery.tools'],
      python_requires='>=3.7',
      install_requires=['requests>=2.20'],
      extras_require={
          'django': ['Django>=2.2'],
          'test': ['pytest>=6', 'Django>=2.2'],
      },
      entry_points={
          'console_scripts': [
              'solrquery-query = solrquery.tools.query:main',
              'solrquery-index = solrquery.tools.index:main',
          ],
      },
     )
