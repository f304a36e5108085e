""" Test package for Afterburner magic key highlighting. __init__.py loads common test resources. """

import json
import os

# Practice words mapped to their expected annotation with the default classifier and default options.
_annotations_path = os.path.join(os.path.dirname(__file__), "data", "annotations.json")
with open(_annotations_path, encoding='utf-8') as fp:
    TEST_ANNOTATIONS = json.load(fp)
del _annotations_path
