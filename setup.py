#!/usr/bin/env python

from setuptools import setup

setup(name='strprep',
      version='1.0.0',
      description='RFC 3454 stringprep profiles: SASLprep, Nameprep, '
                  'Nodeprep, Resourceprep, iSCSI and trace',
      license='GPL-3.0-or-later',
      packages=['strprep'],
      python_requires='>=3.10',
      extras_require={
          'test': ['pytest'],
      },
      )
