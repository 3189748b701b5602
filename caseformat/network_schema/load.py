import pandera.pandas as pa

load_schema = pa.DataFrameSchema(
    {
        "i": pa.Column(int, pa.Check.gt(0), description="number of the bus the load is connected to",
                       metadata={"foreign_key": "bus.i"}),
        "id": pa.Column(str, description="load identifier, unique per bus"),
        "status": pa.Column(int, pa.Check.isin([0, 1]), description="1 - in service, 0 - out of service"),
        "area": pa.Column(int, pa.Check.ge(0), description="area number"),
        "zone": pa.Column(int, pa.Check.ge(0), description="loss zone number"),
        "pl": pa.Column(float, description="constant power active load [MW]"),
        "ql": pa.Column(float, description="constant power reactive load [MVAr]"),
        "ip": pa.Column(float, description="constant current active load [MW at 1 p.u.]"),
        "iq": pa.Column(float, description="constant current reactive load [MVAr at 1 p.u.]"),
        "yp": pa.Column(float, description="constant admittance active load [MW at 1 p.u.]"),
        "yq": pa.Column(float, description="constant admittance reactive load [MVAr at 1 p.u.], "
                                           "negative for an inductive load"),
        "owner": pa.Column(int, pa.Check.ge(0), description="owner number"),
    },
    strict=False,
)
