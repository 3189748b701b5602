import pandera.pandas as pa

from caseformat.network_schema.tools import create_lower_equals_column_check

two_terminal_dc_schema = pa.DataFrameSchema(
    {
        "name": pa.Column(str, description="name of the dc line"),
        "mdc": pa.Column(int, pa.Check.isin([0, 1, 2]),
                         description="control mode (0 - blocked, 1 - power, 2 - current)"),
        "rdc": pa.Column(float, pa.Check.ge(0), description="dc line resistance [ohm]"),
        "setvl": pa.Column(float, description="demand setpoint, MW for mode 1 and A for mode 2"),
        "vschd": pa.Column(float, pa.Check.ge(0), description="scheduled compounded dc voltage [kV]"),
        "vcmod": pa.Column(float, pa.Check.ge(0), description="mode switch dc voltage [kV]"),
        "ipr": pa.Column(int, pa.Check.gt(0), description="rectifier converter bus number",
                         metadata={"foreign_key": "bus.i"}),
        "alfmx": pa.Column(float, pa.Check.in_range(0, 90), description="maximum rectifier firing angle [degree]"),
        "alfmn": pa.Column(float, pa.Check.in_range(0, 90), description="minimum rectifier firing angle [degree]"),
        "ebasr": pa.Column(float, pa.Check.ge(0), description="rectifier primary base ac voltage [kV]"),
        "ipi": pa.Column(int, pa.Check.gt(0), description="inverter converter bus number",
                         metadata={"foreign_key": "bus.i"}),
        "gammx": pa.Column(float, pa.Check.in_range(0, 90), description="maximum inverter margin angle [degree]"),
        "gammn": pa.Column(float, pa.Check.in_range(0, 90), description="minimum inverter margin angle [degree]"),
        "ebasi": pa.Column(float, pa.Check.ge(0), description="inverter primary base ac voltage [kV]"),
        "ckt": pa.Column(str, description="circuit identifier"),
    },
    checks=[
        create_lower_equals_column_check(first_element="alfmn", second_element="alfmx"),
        create_lower_equals_column_check(first_element="gammn", second_element="gammx"),
    ],
    strict=False,
)
