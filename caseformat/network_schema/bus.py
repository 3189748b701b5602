import pandera.pandas as pa

from caseformat.network_schema.tools import create_lower_equals_column_check

_bus_columns = {
    "i": pa.Column(int, pa.Check.gt(0), unique=True, description="bus number"),
    "name": pa.Column(str, nullable=True, description="name of the bus"),
    "basekv": pa.Column(float, pa.Check.ge(0), description="bus base voltage [kV]"),
    "ide": pa.Column(int, pa.Check.isin([1, 2, 3, 4]), description="bus type code (1 = PQ, 2 = PV, 3 = ref, 4 = isolated)"),
    "area": pa.Column(int, pa.Check.ge(0), description="area number"),
    "zone": pa.Column(int, pa.Check.ge(0), description="loss zone number"),
    "owner": pa.Column(int, pa.Check.ge(0), description="owner number"),
    "vm": pa.Column(float, pa.Check.gt(0), description="voltage magnitude [p.u.]"),
    "va": pa.Column(float, description="voltage angle [degree]"),
    "nvhi": pa.Column(float, nullable=True, description="normal voltage magnitude high limit [p.u.]"),
    "nvlo": pa.Column(float, nullable=True, description="normal voltage magnitude low limit [p.u.]"),
    "evhi": pa.Column(float, nullable=True, description="emergency voltage magnitude high limit [p.u.]"),
    "evlo": pa.Column(float, nullable=True, description="emergency voltage magnitude low limit [p.u.]"),
}
bus_schema = pa.DataFrameSchema(
    _bus_columns,
    checks=[
        create_lower_equals_column_check(first_element="nvlo", second_element="nvhi"),
        create_lower_equals_column_check(first_element="evlo", second_element="evhi"),
    ],
    strict=False,
)
