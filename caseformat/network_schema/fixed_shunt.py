import pandera.pandas as pa

fixed_shunt_schema = pa.DataFrameSchema(
    {
        "i": pa.Column(int, pa.Check.gt(0), description="number of the bus the shunt is connected to",
                       metadata={"foreign_key": "bus.i"}),
        "id": pa.Column(str, description="shunt identifier, unique per bus"),
        "status": pa.Column(int, pa.Check.isin([0, 1]), description="1 - in service, 0 - out of service"),
        "gl": pa.Column(float, description="active component of shunt admittance [MW at 1 p.u.]"),
        "bl": pa.Column(float, description="reactive component of shunt admittance [MVAr at 1 p.u.]"),
    },
    strict=False,
)
