import os
from caseformat import cf_dir

test_path = os.path.join(cf_dir, 'test')

from caseformat.test.conftest import *
