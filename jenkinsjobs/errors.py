# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

class JenkinsJobsError(Exception):
    pass

class JenkinsJobsConfigError(JenkinsJobsError):
    pass

class SourceConfigError(JenkinsJobsError):
    pass

class TemplateNotFoundError(JenkinsJobsError):
    pass

class TemplateRenderError(JenkinsJobsError):
    pass

class BootstrapError(JenkinsJobsError):
    pass

class OutputError(JenkinsJobsError):
    pass
