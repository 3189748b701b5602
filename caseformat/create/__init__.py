from caseformat.create.network_create import create_empty_raw_network
from caseformat.create.bus_create import create_bus
from caseformat.create.load_create import create_load
from caseformat.create.shunt_create import create_fixed_shunt, create_switched_shunt
from caseformat.create.gen_create import create_generator
from caseformat.create.line_create import create_branch
from caseformat.create.trafo_create import create_transformer, create_transformer3w
from caseformat.create.dcline_create import create_dcline
