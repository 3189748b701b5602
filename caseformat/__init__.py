import os
cf_dir = os.path.dirname(os.path.realpath(__file__))

from caseformat._version import __version__, __format_version__
from caseformat.auxiliary import *
from caseformat.create import *
from caseformat.converter import *
from caseformat.file_io import to_case_dir, from_case_dir, to_case_zip, from_case_zip
from caseformat.validate import validate_case, validate_bus_numbers, validate_gen
from caseformat.network_schema.validation import validate_raw_network

import pandas as pd
pd.options.mode.chained_assignment = None  # default='warn'
