import pandera.pandas as pa

from caseformat.network_schema.tools import create_lower_equals_column_check

generator_schema = pa.DataFrameSchema(
    {
        "i": pa.Column(int, pa.Check.gt(0), description="number of the bus the generator is connected to",
                       metadata={"foreign_key": "bus.i"}),
        "id": pa.Column(str, description="machine identifier, unique per bus"),
        "pg": pa.Column(float, description="active power output [MW]"),
        "qg": pa.Column(float, description="reactive power output [MVAr]"),
        "qt": pa.Column(float, description="maximum reactive power output [MVAr]"),
        "qb": pa.Column(float, description="minimum reactive power output [MVAr]"),
        "vs": pa.Column(float, pa.Check.gt(0), description="regulated voltage setpoint [p.u.]"),
        "ireg": pa.Column(int, pa.Check.ge(0), description="remote regulated bus number, 0 for the terminal bus"),
        "mbase": pa.Column(float, pa.Check.gt(0), description="machine MVA base"),
        "stat": pa.Column(int, pa.Check.isin([0, 1]), description="1 - in service, 0 - out of service"),
        "pt": pa.Column(float, description="maximum active power output [MW]"),
        "pb": pa.Column(float, description="minimum active power output [MW]"),
    },
    checks=[
        create_lower_equals_column_check(first_element="qb", second_element="qt"),
        create_lower_equals_column_check(first_element="pb", second_element="pt"),
    ],
    strict=False,
)
