# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import logging

from argparse import ArgumentParser

from jenkinsjobs.errors import JenkinsJobsError
from jenkinsjobs.jobs import generate_jobs
from jenkinsjobs.settings import Settings

def parse_cmdline_args(argv=None):
    parser = ArgumentParser(prog="jenkins-jobs",
                            description="Generates the Jenkins Jobs helm files")
    parser.add_argument('-d', '--dir', default=None,
                        help="the current working directory")
    parser.add_argument('-o', '--out', default=None,
                        help="the output directory for the generated config files. "
                        "If not specified defaults to the helmfiles dir in the "
                        "current directory")
    parser.add_argument('-c', '--config', default=None,
                        help="the configuration file to load for the repository "
                        "configurations. If not specified we look in "
                        "./.jx/gitops/source-config.yaml")
    parser.add_argument('--default-template', default=None,
                        help="the default job template file if none is configured "
                        "for a repository")
    parser.add_argument('--no-create-helmfile', action='store_true',
                        help="disables the creation of the helmfiles/jenkinsName/"
                        "helmfile.yaml file if a jenkins server does not yet exist")
    parser.add_argument('--settings', default=None,
                        help="settings file of this tool, all defaults if not given")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_cmdline_args(argv)
    settings = Settings('jenkins-jobs')
    try:
        settings.parse_config(args.settings)
        settings.override(workdir=args.dir, outdir=args.out,
                          source_config=args.config,
                          default_template=args.default_template,
                          no_create_helmfile=args.no_create_helmfile)
        written = generate_jobs()
    except JenkinsJobsError as error:
        logging.error("Failed to generate the Jenkins jobs (%s)", error)
        return 1

    for server, path in written.items():
        logging.info("Jenkins server '%s' jobs written to %s", server, path)
    return 0
