#!/usr/bin/python3

import sys
import logging

from strprep import ProfileRegistry
from strprep import StringPrepError

consoleloghandler = logging.StreamHandler()
log = logging.getLogger('strprep')
log.setLevel('INFO')
log.addHandler(consoleloghandler)

if len(sys.argv) < 3:
    print("Syntax: prepare PROFILE text [--query]")
    sys.exit(0)

profile = sys.argv[1]
text = sys.argv[2]
allow_unassigned = '--query' in sys.argv[3:]

registry = ProfileRegistry()
try:
    engine = registry.get_instance(profile)
except ValueError as error:
    sys.exit(str(error))

try:
    print(engine.prepare(text, allow_unassigned=allow_unassigned))
except StringPrepError as error:
    sys.exit(f'{engine.name}: {error}')
