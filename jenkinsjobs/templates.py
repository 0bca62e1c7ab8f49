# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import os
import re
import logging

from collections import namedtuple
from datetime import datetime

from jinja2 import Environment, StrictUndefined
from jinja2 import TemplateError, TemplateSyntaxError

from jenkinsjobs.errors import TemplateNotFoundError, TemplateRenderError
from jenkinsjobs.variables import bind_variables, full_name

ResolvedJob = namedtuple('ResolvedJob',
                         ['server', 'key', 'template_file', 'template_text',
                          'variables'])

class TemplateLoader():
    """Reads job templates relative to a working directory.

    The raw text of each template is read at most once per run, no
    matter how many repositories reference it.
    """

    def __init__(self, workdir):
        self.workdir = workdir
        self._cache = {}

    def load(self, template_path, repository_url=""):
        path = os.path.join(self.workdir, template_path)
        if not os.path.isfile(path):
            raise TemplateNotFoundError("The job template file %s for repository "
                                        "%s does not exist" % (path, repository_url))
        key = os.path.abspath(path)
        if key not in self._cache:
            logging.debug("Loading job template %s", path)
            try:
                with open(path, 'r') as template_file:
                    self._cache[key] = template_file.read()
            except IOError as error:
                raise TemplateNotFoundError("Failed to load file %s (%s)" %
                                            (path, error))
        return path, self._cache[key]

    def resolve(self, server, group, repository, template_path):
        path, text = self.load(template_path, repository.url)
        return ResolvedJob(server=server,
                           key=full_name(group.owner, repository.name),
                           template_file=path,
                           template_text=text,
                           variables=bind_variables(group, repository))

## Template functions

def _trim_prefix(value, prefix):
    value = str(value)
    if prefix and value.startswith(prefix):
        return value[len(prefix):]
    return value

def _trim_suffix(value, suffix):
    value = str(value)
    if suffix and value.endswith(suffix):
        return value[:-len(suffix)]
    return value

def _quote(value):
    return '"%s"' % str(value).replace('\\', '\\\\').replace('"', '\\"')

def _squote(value):
    return "'%s'" % value

def _words(value):
    value = re.sub(r'([a-z0-9])([A-Z])', r'\1 \2', str(value))
    return [word.lower() for word in re.split(r'[^A-Za-z0-9]+', value) if word]

def _kebabcase(value):
    return "-".join(_words(value))

def _snakecase(value):
    return "_".join(_words(value))

def _uniq(values):
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen

def _add(*values):
    return sum(int(value) for value in values)

def _sub(left, right):
    return int(left) - int(right)

def _date(value, fmt="%Y-%m-%d"):
    return value.strftime(fmt)

DEFAULT_FILTERS = {
    'trimPrefix': _trim_prefix,
    'trimSuffix': _trim_suffix,
    'quote': _quote,
    'squote': _squote,
    'kebabcase': _kebabcase,
    'snakecase': _snakecase,
    'uniq': _uniq,
    'add': _add,
    'sub': _sub,
    'date': _date,
}

DEFAULT_GLOBALS = {
    'now': datetime.now,
    'add': _add,
    'sub': _sub,
}

class TemplateFunctions():
    """The set of helpers made available to job templates.

    With builtins disabled Jinja2's own filters and tests are dropped
    and only the given filters and functions exist.
    """

    def __init__(self, filters=None, functions=None, builtins=True):
        self.filters = dict(DEFAULT_FILTERS if filters is None else filters)
        self.globals = dict(DEFAULT_GLOBALS if functions is None else functions)
        self.builtins = builtins

    def environment(self):
        env = Environment(undefined=StrictUndefined, keep_trailing_newline=True)
        if not self.builtins:
            env.filters.clear()
            env.globals.clear()
            env.tests.clear()
        env.filters.update(self.filters)
        env.globals.update(self.globals)
        return env

# Go template style field references, e.g. {{.FullName}}
GO_FIELD_REFERENCE = re.compile(r'{{-?\s*\.\w')

def render_template(functions, variables, text, path, server):
    env = functions.environment()
    try:
        return env.from_string(text).render(variables)
    except TemplateSyntaxError as error:
        hint = ""
        if GO_FIELD_REFERENCE.search(text):
            hint = ", variables are referenced as {{ Name }} not {{.Name}}"
        raise TemplateRenderError("Failed to parse template %s for Jenkins "
                                  "Server %s (%s%s)" % (path, server, error, hint))
    except TemplateError as error:
        raise TemplateRenderError("Failed to evaluate template %s for Jenkins "
                                  "Server %s (%s)" % (path, server, error))
    except Exception as error:
        raise TemplateRenderError("Function call failed in template %s for "
                                  "Jenkins Server %s (%s: %s)" %
                                  (path, server, type(error).__name__, error))
