#!/usr/bin/python3
# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

from setuptools import setup

try:
    with open("requirements.txt", encoding='utf-8') as requirements:
        INSTALL_REQUIRES = [req.strip() for req in requirements.readlines()]
except OSError:
    INSTALL_REQUIRES = None

setup(name='jenkinsjobs',
      version='1.0.0',
      description='Generates Jenkins JCasC job values files from a source config',
      classifiers=[
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: 3 :: Only',
          'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
      ],
      install_requires=INSTALL_REQUIRES,
      extras_require={
          'test': ['pytest'],
      },
      packages=[
          'jenkinsjobs', 'jenkinsjobs.test'
      ],
      scripts=[
          'bin/jenkins-jobs'
      ],
     )
