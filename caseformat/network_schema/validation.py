import logging

import pandera.pandas as pa

from caseformat.auxiliary import RawNetwork
from caseformat.network_schema import RAW_TABLES
from caseformat.network_schema.tools import create_bus_reference_check

logger = logging.getLogger(__name__)


def _bus_reference_validation(element: str, net: RawNetwork):
    """
    Validates that every bus number column of a record table refers to an existing raw bus.
    Columns are found through the 'foreign_key' metadata of the table schema.
    """
    schema = RAW_TABLES[element]
    df = net[element]
    bus_numbers = net.bus.i.values
    for name, col in schema.columns.items():
        if name not in df.columns or (col.metadata or {}).get("foreign_key") != "bus.i":
            continue
        values = df[name]
        if name == "k":
            # a zero winding 3 bus marks a two-winding transformer
            values = values[values != 0]
        check = create_bus_reference_check(bus_numbers, name, element)
        pa.DataFrameSchema({name: pa.Column(checks=[check])}, strict=False).validate(values.to_frame())


def validate_raw_network(net: RawNetwork):
    """
    Validate the record tables of a raw network against their pandera schemas.

    For every table found in the network the column types and value ranges are checked, and
    every column that references a bus is checked against the bus numbers of net.bus.

    Args:
        net (RawNetwork): the raw network to check.

    Raises:
        pa.errors.SchemaError: if a table does not fit its schema.
        ValueError: if a record refers to a bus number that does not exist.

    Example:
        >>> net = create_empty_raw_network()
        >>> # ... populate network with records
        >>> validate_raw_network(net)
    """
    for element, schema in RAW_TABLES.items():
        if element not in net:
            logger.debug("raw network has no %s table, skipping validation" % element)
            continue
        schema.validate(net[element])
        _bus_reference_validation(element, net)
