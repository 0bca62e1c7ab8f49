# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import logging
import yaml

from jenkinsjobs.errors import BootstrapError
from jenkinsjobs.aggregator import JOB_VALUES_FILENAME
from jenkinsjobs.settings import Settings

HELMFILE_FILENAME = "helmfile.yaml"
VALUES_FILENAME = "values.yaml"

SAMPLE_VALUES_FILE = """# custom Jenkins chart configuration
# see https://github.com/jenkinsci/helm-charts/blob/main/charts/jenkins/VALUES_SUMMARY.md

sampleValue: removeMeWhenYouAddRealConfiguration
"""

def ensure_server_profile(server):
    """Make sure a Jenkins server has a helmfile and a values file.

    Returns True if the helmfile had to be created. Nothing is touched
    when the server's helmfile is already there.
    """
    settings = Settings()
    server_dir = os.path.join(settings.OUTDIR, server)
    helmfile_path = os.path.join(server_dir, HELMFILE_FILENAME)
    if os.path.isfile(helmfile_path):
        logging.debug("Helmfile %s already exists", helmfile_path)
        return False

    logging.info("Adding Jenkins server '%s'", server)
    try:
        os.makedirs(server_dir, exist_ok=True)
    except OSError as error:
        raise BootstrapError("Failed to create dir %s (%s)" % (server_dir, error))

    _dump_yaml(helmfile_path, _server_helmfile(server))
    _register_helmfile(helmfile_path)

    values_path = os.path.join(server_dir, VALUES_FILENAME)
    if not os.path.isfile(values_path):
        logging.info("Creating sample values file %s", values_path)
        try:
            with open(values_path, 'w') as values_file:
                values_file.write(SAMPLE_VALUES_FILE)
        except IOError as error:
            raise BootstrapError("Failed to save %s (%s)" % (values_path, error))
    return True

def _server_helmfile(server):
    settings = Settings()
    chart = settings.BOOTSTRAP_CHART
    repository_name = chart.split("/")[0] if "/" in chart else "jenkins"
    return {
        'namespace': server,
        'repositories': [{'name': repository_name,
                          'url': settings.BOOTSTRAP_CHART_REPOSITORY}],
        'releases': [{'chart': chart,
                      'name': server,
                      'values': [JOB_VALUES_FILENAME, VALUES_FILENAME]}],
    }

def _register_helmfile(helmfile_path):
    settings = Settings()
    root_path = os.path.join(settings.DIR, HELMFILE_FILENAME)
    relpath = os.path.relpath(helmfile_path, settings.DIR)

    root = {}
    if os.path.isfile(root_path):
        try:
            with open(root_path, 'r') as root_file:
                root = yaml.safe_load(root_file) or {}
        except (yaml.YAMLError, IOError) as error:
            raise BootstrapError("Unable to read %s (%s)" % (root_path, error))
        if not isinstance(root, dict):
            raise BootstrapError("%s does not look like a helmfile" % root_path)

    helmfiles = root.setdefault('helmfiles', [])
    if not isinstance(helmfiles, list):
        raise BootstrapError("'helmfiles' in %s is not a list" % root_path)
    for entry in helmfiles:
        if isinstance(entry, dict) and entry.get('path') == relpath:
            logging.debug("%s already registered in %s", relpath, root_path)
            return
    helmfiles.append({'path': relpath})
    logging.info("Registering %s in %s", relpath, root_path)
    _dump_yaml(root_path, root)

def _dump_yaml(path, data):
    try:
        with open(path, 'w') as yaml_file:
            yaml.safe_dump(data, yaml_file, default_flow_style=False)
    except IOError as error:
        raise BootstrapError("Failed to save %s (%s)" % (path, error))
