# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import yaml

from jenkinsjobs.errors import SourceConfigError

GITHUB_URL = "https://github.com"
GITHUB_KIND = "github"

# Ex:
# apiVersion: gitops.jenkins-x.io/v1alpha1
# kind: SourceConfig
# spec:
#   jenkinsJobTemplate: jenkins/templates/default.job.gotmpl
#   jenkinsServers:
#   - server: myjenkins
#     jobTemplate: jenkins/templates/myjenkins.job.gotmpl
#     groups:
#     - owner: acme
#       provider: https://github.com
#       repositories:
#       - name: widgets

class Repository():
    def __init__(self, name="", url="", http_clone_url="",
                 jenkins_job_template=""):
        self.name = name
        self.url = url
        self.http_clone_url = http_clone_url
        self.jenkins_job_template = jenkins_job_template

class Group():
    def __init__(self, owner="", provider="", provider_kind="",
                 provider_name="", jenkins_job_template="", repositories=None):
        self.owner = owner
        self.provider = provider
        self.provider_kind = provider_kind
        self.provider_name = provider_name
        self.jenkins_job_template = jenkins_job_template
        self.repositories = repositories or []

class JenkinsServer():
    def __init__(self, server="", job_template="", groups=None):
        self.server = server
        self.job_template = job_template
        self.groups = groups or []

class SourceConfig():
    def __init__(self, jenkins_servers=None, jenkins_job_template=""):
        self.jenkins_servers = jenkins_servers or []
        self.jenkins_job_template = jenkins_job_template

def load_source_config(path):
    logging.debug("Reading source config from %s", path)
    try:
        with open(path, 'r') as source_config_file:
            document = yaml.safe_load(source_config_file)
    except yaml.YAMLError as error:
        raise SourceConfigError("Unable to parse %s (%s)" % (path, error))
    except IOError as error:
        raise SourceConfigError("Unable to open %s for reading (%s)" %
                                (path, error))

    try:
        return parse_source_config(document)
    except SourceConfigError as error:
        raise SourceConfigError("Failed to load file %s (%s)" % (path, error))

def parse_source_config(document):
    if document is None:
        return SourceConfig()
    spec = _mapping(document, 'document').get('spec')
    if spec is None:
        return SourceConfig()
    spec = _mapping(spec, 'spec')
    servers = [_parse_server(server) for server in
               _sequence(spec.get('jenkinsServers'), 'jenkinsServers')]
    return SourceConfig(jenkins_servers=servers,
                        jenkins_job_template=_string(spec, 'jenkinsJobTemplate'))

def default_values(group, repository):
    """Fill in the values a repository can derive from its group."""
    if not group.provider:
        group.provider = GITHUB_URL
    if not group.provider_kind and group.provider == GITHUB_URL:
        group.provider_kind = GITHUB_KIND
    if not group.provider_name:
        group.provider_name = group.provider_kind
    if not repository.url:
        repository.url = "/".join(part.strip("/") for part in
                                  (group.provider, group.owner, repository.name)
                                  if part)
    if not repository.http_clone_url:
        repository.http_clone_url = repository.url + ".git"

def _parse_server(data):
    data = _mapping(data, 'jenkinsServers')
    groups = [_parse_group(group) for group in
              _sequence(data.get('groups'), 'groups')]
    return JenkinsServer(server=_string(data, 'server'),
                         job_template=_string(data, 'jobTemplate'),
                         groups=groups)

def _parse_group(data):
    data = _mapping(data, 'groups')
    repositories = [_parse_repository(repository) for repository in
                    _sequence(data.get('repositories'), 'repositories')]
    return Group(owner=_string(data, 'owner'),
                 provider=_string(data, 'provider'),
                 provider_kind=_string(data, 'providerKind'),
                 provider_name=_string(data, 'providerName'),
                 jenkins_job_template=_string(data, 'jenkinsJobTemplate'),
                 repositories=repositories)

def _parse_repository(data):
    data = _mapping(data, 'repositories')
    return Repository(name=_string(data, 'name'),
                      url=_string(data, 'url'),
                      http_clone_url=_string(data, 'httpCloneURL'),
                      jenkins_job_template=_string(data, 'jenkinsJobTemplate'))

def _mapping(value, key):
    if not isinstance(value, dict):
        raise SourceConfigError("'%s' does not look like a dict" % key)
    return value

def _sequence(value, key):
    if value is None:
        return []
    if not isinstance(value, list):
        raise SourceConfigError("'%s' does not look like a list" % key)
    return value

def _string(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise SourceConfigError("'%s' is not a string" % key)
    return str(value)
