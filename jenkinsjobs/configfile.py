# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

CONFIG_GRAMMAR = """
[main]
dir = string(default='.')
outdir = string(default=None)
sourceconfig = string(default=None)
defaulttemplate = string(default=None)
debuglevel = option('INFO', 'DEBUG', 'ERROR', default='INFO')
logdir = string(default=None)
binaryname = string(default='jx gitops')
[bootstrap]
enabled = boolean(default=True)
chart = string(default='jenkins/jenkins')
chartrepository = string(default='https://charts.jenkins.io')
"""
