# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os

from configobj import ConfigObj, flatten_errors
from configobj import ConfigObjError
from validate import Validator

from jenkinsjobs.errors import JenkinsJobsConfigError
from jenkinsjobs.configfile import CONFIG_GRAMMAR

SOURCE_CONFIG_RELPATH = os.path.join(".jx", "gitops", "source-config.yaml")
OUTDIR_RELPATH = "helmfiles"

class Settings():
    __shared_state = {}

    def __init__(self, logfile=None):
        self.__dict__ = self.__shared_state
        if 'logfile' not in self.__dict__:
            self.logfile = logfile

    def parse_config(self, config_file_path=None):
        try:
            config = ConfigObj(infile=config_file_path,
                               configspec=CONFIG_GRAMMAR.split("\n"),
                               file_error=config_file_path is not None)
        except (ConfigObjError, IOError) as error:
            raise JenkinsJobsConfigError("Config file parsing failed (%s)" % error)

        validator = Validator()
        results = config.validate(validator, preserve_errors=True)

        if results is not True:
            for error in flatten_errors(config, results):
                section_list, key, _ = error
                section_string = '.'.join(section_list)
                if key is not None:
                    raise JenkinsJobsConfigError("Missing/not valid mandatory configuration "
                                                 "key %s in section %s" % (key, section_string))
                else:
                    raise JenkinsJobsConfigError("Section '%s' is missing" % section_string)

        # Save a reference in case we need the raw values later
        self.config = config

        # [main]
        self.DIR = config["main"]["dir"]
        self._outdir = config["main"]["outdir"]
        self._source_config = config["main"]["sourceconfig"]
        self.DEFAULT_TEMPLATE = config["main"]["defaulttemplate"]
        self.DEBUG_LEVEL = config["main"]["debuglevel"]
        self.LOGDIR = config["main"]["logdir"]
        self.BINARY_NAME = config["main"]["binaryname"]

        # [bootstrap]
        self.BOOTSTRAP_ENABLED = config["bootstrap"]["enabled"]
        self.BOOTSTRAP_CHART = config["bootstrap"]["chart"]
        self.BOOTSTRAP_CHART_REPOSITORY = config["bootstrap"]["chartrepository"]

        self._derive_paths()

        if self.logfile and self.LOGDIR:
            logging.basicConfig(
                level = getattr(logging, self.DEBUG_LEVEL),
                format = '%(asctime)s %(levelname)s %(message)s',
                filename = "%s/%s.log" % (self.LOGDIR, self.logfile))
        else:
            logging.basicConfig(
                level = getattr(logging, self.DEBUG_LEVEL),
                format = '%(message)s')

    def override(self, workdir=None, outdir=None, source_config=None,
                 default_template=None, no_create_helmfile=False):
        """Apply command line options on top of the parsed settings.

        Blank values leave the current setting untouched. Output and
        source config paths not set explicitly follow the working
        directory.
        """
        if workdir:
            self.DIR = workdir
        if outdir:
            self._outdir = outdir
        if source_config:
            self._source_config = source_config
        if default_template:
            self.DEFAULT_TEMPLATE = default_template
        if no_create_helmfile:
            self.BOOTSTRAP_ENABLED = False
        self._derive_paths()

    def _derive_paths(self):
        self.OUTDIR = self._outdir or os.path.join(self.DIR, OUTDIR_RELPATH)
        self.SOURCE_CONFIG = self._source_config or \
            os.path.join(self.DIR, SOURCE_CONFIG_RELPATH)
