from caseformat.network_schema.bus import bus_schema
from caseformat.network_schema.load import load_schema
from caseformat.network_schema.fixed_shunt import fixed_shunt_schema
from caseformat.network_schema.switched_shunt import switched_shunt_schema
from caseformat.network_schema.generator import generator_schema
from caseformat.network_schema.branch import branch_schema
from caseformat.network_schema.transformer import transformer_schema
from caseformat.network_schema.two_terminal_dc import two_terminal_dc_schema

RAW_TABLES = {
    "bus": bus_schema,
    "load": load_schema,
    "fixed_shunt": fixed_shunt_schema,
    "switched_shunt": switched_shunt_schema,
    "generator": generator_schema,
    "branch": branch_schema,
    "transformer": transformer_schema,
    "two_terminal_dc": two_terminal_dc_schema,
}
