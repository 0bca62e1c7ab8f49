# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os

from jenkinsjobs.settings import Settings
from jenkinsjobs.errors import JenkinsJobsConfigError

from jenkinsjobs.test.testcases import JenkinsJobsTestCase

class SettingsTest(JenkinsJobsTestCase):

    #### TESTS ####

    def test_values_from_file(self):
        self.assertEqual(self.settings.DIR, self.workdir)
        self.assertEqual(self.settings.DEBUG_LEVEL, 'DEBUG')
        self.assertEqual(self.settings.LOGDIR, "%s/log" % self.sandbox_path)
        self.assertTrue(self.settings.BOOTSTRAP_ENABLED)

    def test_paths_derived_from_dir(self):
        self.assertEqual(self.settings.OUTDIR,
                         os.path.join(self.workdir, "helmfiles"))
        self.assertEqual(self.settings.SOURCE_CONFIG,
                         os.path.join(self.workdir, ".jx", "gitops",
                                      "source-config.yaml"))

    def test_defaults_without_file(self):
        settings = Settings()
        settings.parse_config()
        self.assertEqual(settings.DIR, '.')
        self.assertEqual(settings.OUTDIR, os.path.join('.', 'helmfiles'))
        self.assertIsNone(settings.DEFAULT_TEMPLATE)
        self.assertEqual(settings.BINARY_NAME, 'jx gitops')
        self.assertEqual(settings.BOOTSTRAP_CHART, 'jenkins/jenkins')
        self.assertEqual(settings.BOOTSTRAP_CHART_REPOSITORY,
                         'https://charts.jenkins.io')

    def test_settings_are_shared(self):
        self.assertEqual(Settings().DIR, self.settings.DIR)

    def test_override_dir_moves_derived_paths(self):
        self.settings.override(workdir="/tmp/elsewhere")
        self.assertEqual(self.settings.OUTDIR, "/tmp/elsewhere/helmfiles")
        self.assertEqual(self.settings.SOURCE_CONFIG,
                         "/tmp/elsewhere/.jx/gitops/source-config.yaml")

    def test_override_explicit_paths(self):
        self.settings.override(outdir="/tmp/out", source_config="/tmp/sc.yaml",
                               default_template="t.gotmpl",
                               no_create_helmfile=True)
        self.assertEqual(self.settings.OUTDIR, "/tmp/out")
        self.assertEqual(self.settings.SOURCE_CONFIG, "/tmp/sc.yaml")
        self.assertEqual(self.settings.DEFAULT_TEMPLATE, "t.gotmpl")
        self.assertFalse(self.settings.BOOTSTRAP_ENABLED)
        self.assertEqual(self.settings.DIR, self.workdir)

    def test_override_blanks_keep_values(self):
        self.settings.override()
        self.assertEqual(self.settings.DIR, self.workdir)
        self.assertTrue(self.settings.BOOTSTRAP_ENABLED)

    def test_invalid_value(self):
        with open(self.config_file_path, 'w') as config_file:
            config_file.write("[main]\ndebuglevel = LOUD\n")
        self.assertRaisesRegex(JenkinsJobsConfigError, "debuglevel",
                               self.settings.parse_config, self.config_file_path)

    def test_missing_file(self):
        self.assertRaises(JenkinsJobsConfigError, self.settings.parse_config,
                          "%s/etc/nope.conf" % self.sandbox_path)
