# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os

from jenkinsjobs.cli import main, parse_cmdline_args

from jenkinsjobs.test.tools import write_source_config, write_template
from jenkinsjobs.test.tools import widgets_config
from jenkinsjobs.test.testcases import JenkinsJobsTestCase

class CommandLineTest(JenkinsJobsTestCase):

    def _main(self, *args):
        return main(["--settings", self.config_file_path] + list(args))

    #### TESTS ####

    def test_parse_defaults(self):
        args = parse_cmdline_args([])
        self.assertIsNone(args.dir)
        self.assertIsNone(args.out)
        self.assertIsNone(args.config)
        self.assertIsNone(args.default_template)
        self.assertFalse(args.no_create_helmfile)

    def test_parse_flags(self):
        args = parse_cmdline_args(["-d", "/w", "-o", "/o", "-c", "/c.yaml",
                                   "--default-template", "t.gotmpl",
                                   "--no-create-helmfile"])
        self.assertEqual(args.dir, "/w")
        self.assertEqual(args.out, "/o")
        self.assertEqual(args.config, "/c.yaml")
        self.assertEqual(args.default_template, "t.gotmpl")
        self.assertTrue(args.no_create_helmfile)

    def test_generates(self):
        write_template("jenkins/templates/group.job.gotmpl", "{{ FullName }}")
        write_source_config(widgets_config())
        outdir = "%s/out" % self.sandbox_path
        self.assertEqual(self._main("-o", outdir, "--no-create-helmfile"), 0)
        self.assertTrue(os.path.isfile("%s/main/job-values.yaml" % outdir))
        self.assertFalse(os.path.exists("%s/main/helmfile.yaml" % outdir))

    def test_missing_source_config_is_fine(self):
        self.assertEqual(self._main("-c", "%s/nope.yaml" % self.sandbox_path), 0)

    def test_failure_exit_code(self):
        write_source_config(widgets_config(template="jenkins/templates/nope.gotmpl"))
        self.assertEqual(self._main(), 1)
        self.assertLogContains("ERROR Failed to generate the Jenkins jobs .*nope.gotmpl")

    def test_template_runtime_error_exit_code(self):
        write_template("jenkins/templates/group.job.gotmpl", "{{ 1 // 0 }}")
        write_source_config(widgets_config())
        self.assertEqual(self._main(), 1)
        self.assertLogContains("ERROR Failed to generate the Jenkins jobs "
                               ".*group.job.gotmpl for Jenkins Server main")
