# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import logging

from collections import OrderedDict

from jenkinsjobs.aggregator import JOB_VALUES_FILENAME
from jenkinsjobs.aggregator import render_document, write_document
from jenkinsjobs.bootstrap import ensure_server_profile
from jenkinsjobs.decorators import timed
from jenkinsjobs.errors import BootstrapError, OutputError
from jenkinsjobs.overrides import resolve_default_template, resolve_jobs
from jenkinsjobs.settings import Settings
from jenkinsjobs.sourceconfig import load_source_config
from jenkinsjobs.templates import TemplateFunctions, TemplateLoader

@timed
def generate_jobs(functions=None):
    """Generate the job-values.yaml file of every configured Jenkins server.

    Returns an ordered mapping of server name to the path written.
    """
    settings = Settings()
    if functions is None:
        functions = TemplateFunctions()

    if not os.path.isfile(settings.SOURCE_CONFIG):
        logging.info("The source config file %s does not exist",
                     settings.SOURCE_CONFIG)
        return OrderedDict()

    config = load_source_config(settings.SOURCE_CONFIG)
    config.jenkins_job_template = resolve_default_template(
        config, settings.DIR, settings.DEFAULT_TEMPLATE)

    buckets = resolve_jobs(config, TemplateLoader(settings.DIR))
    logging.info("%d Jenkins servers with jobs: %s", len(buckets),
                 list(buckets.keys()))

    written = OrderedDict()
    for server, jobs in buckets.items():
        written[server] = _generate_server_jobs(server, jobs, functions)
    return written

def _generate_server_jobs(server, jobs, functions):
    settings = Settings()
    document = render_document(server, jobs, functions, settings.BINARY_NAME)

    server_dir = os.path.join(settings.OUTDIR, server)
    try:
        os.makedirs(server_dir, exist_ok=True)
    except OSError as error:
        raise OutputError("Failed to create dir %s (%s)" % (server_dir, error))

    if settings.BOOTSTRAP_ENABLED:
        try:
            ensure_server_profile(server)
        except BootstrapError as error:
            raise BootstrapError("Failed to verify the Jenkins helmfile exists "
                                 "for %s (%s)" % (server, error))

    path = os.path.join(server_dir, JOB_VALUES_FILENAME)
    write_document(path, document)
    return path
