# SPDX-FileCopyrightText: 2014-2023 CERN
# SPDX-License-Identifier: GPL-3.0-or-later

import logging

from jenkinsjobs.errors import OutputError
from jenkinsjobs.templates import render_template

JOB_VALUES_FILENAME = "job-values.yaml"

JOB_VALUES_HEADER = """# NOTE this file is autogenerated - DO NOT EDIT!
#
# This file is generated from the template files via the command:
#    %s jenkins jobs
controller:
  JCasC:
    configScripts:
      jxsetup: |
        jobs:
          - script: |
"""

# Nests each fragment under the 'script: |' block scalar above
INDENT = " " * 14

def header(binary_name):
    return JOB_VALUES_HEADER % binary_name

def indent_text(text, indent=INDENT):
    return indent + ("\n" + indent).join(text.split("\n"))

def render_fragment(job, functions):
    output = render_template(functions, job.variables, job.template_text,
                             job.template_file, job.server)
    # A single trailing newline ends the last line, it is not a blank one
    if output.endswith("\n"):
        output = output[:-1]
    return "%s// from template: %s\n%s\n%s\n" % (INDENT, job.template_file,
                                                 indent_text(output), INDENT)

def render_document(server, jobs, functions, binary_name):
    """Render the job-values.yaml contents for one Jenkins server.

    Fragments are emitted in the order of jobs. The first template
    failing to render aborts the whole document.
    """
    fragments = [header(binary_name)]
    for job in jobs:
        logging.debug("Rendering %s for '%s' from %s", job.key, server,
                      job.template_file)
        fragments.append(render_fragment(job, functions))
    return "".join(fragments)

def write_document(path, text):
    logging.info("Creating Jenkins values file %s", path)
    try:
        with open(path, 'w') as document:
            document.write(text)
    except IOError as error:
        raise OutputError("Failed to save file %s (%s)" % (path, error))
