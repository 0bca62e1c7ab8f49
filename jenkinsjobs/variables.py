# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

def full_name(owner, name):
    return "%s/%s" % (owner, name)

def bind_variables(group, repository):
    """Build the variables a job template can reference for a repository."""
    return {
        'ID': "%s-%s" % (group.owner, repository.name),
        'FullName': full_name(group.owner, repository.name),
        'Owner': group.owner,
        'GitServerURL': group.provider,
        'GitKind': group.provider_kind,
        'GitName': group.provider_name,
        'Repository': repository.name,
        'URL': repository.url,
        'CloneURL': repository.http_clone_url,
    }
