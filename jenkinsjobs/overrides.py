# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import logging

from collections import OrderedDict

from jenkinsjobs.errors import TemplateNotFoundError
from jenkinsjobs.sourceconfig import default_values

DEFAULT_TEMPLATE_RELPATH = os.path.join("jenkins", "templates", "default.job.gotmpl")

def first_non_blank(*values):
    for value in values:
        if value:
            return value
    return ""

def resolve_default_template(config, workdir, default_template=None):
    """Work out the run wide default job template.

    Must be called once before any repository is resolved. A given
    default template must exist even when the config sets its own.
    """
    if default_template:
        path = os.path.join(workdir, default_template)
        if not os.path.isfile(path):
            raise TemplateNotFoundError("The default template file %s does not exist" %
                                        path)

    if config.jenkins_job_template:
        return config.jenkins_job_template

    if default_template:
        return default_template

    path = os.path.join(workdir, DEFAULT_TEMPLATE_RELPATH)
    if os.path.isfile(path):
        logging.debug("Using conventional default job template %s", path)
        return DEFAULT_TEMPLATE_RELPATH
    return ""

def resolve_template_path(config, server, group, repository):
    return first_non_blank(repository.jenkins_job_template,
                           group.jenkins_job_template,
                           server.job_template,
                           config.jenkins_job_template)

def resolve_jobs(config, loader):
    """Map each Jenkins server to its resolved jobs in document order.

    Repositories lacking a server or a job template are skipped.
    """
    buckets = OrderedDict()
    for server in config.jenkins_servers:
        for group in server.groups:
            for repository in group.repositories:
                default_values(group, repository)
                server_name = server.server
                template_path = resolve_template_path(config, server, group,
                                                      repository)
                if not server_name:
                    logging.info("Ignoring repository %s as it has no Jenkins "
                                 "server defined", repository.url)
                    continue
                if not template_path:
                    logging.info("Ignoring repository %s as it has no Jenkins "
                                 "job template defined at the repository, group "
                                 "or server level", repository.url)
                    continue
                job = loader.resolve(server_name, group, repository,
                                     template_path)
                logging.debug("Repository %s uses job template %s on '%s'",
                              repository.url, job.template_file, server_name)
                buckets.setdefault(server_name, []).append(job)
    return buckets
