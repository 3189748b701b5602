import numpy as np
import pandas as pd
import pandera.pandas as pa


def _table_dtype(dtype):
    if isinstance(dtype, pd.api.extensions.ExtensionDtype):
        if isinstance(dtype, pd.StringDtype) or dtype.kind in "OSU":
            return np.dtype(object)
        return dtype
    dtype = pd.api.types.pandas_dtype(dtype)
    return np.dtype(object) if dtype.kind in "US" else dtype


def get_dtypes(schema: pa.DataFrameSchema, required_only: bool = True) -> dict:
    """
    Extract column data types from a pandera DataFrame schema.

    String columns are mapped to the numpy object dtype, which is how pandas stores them in the
    record tables.

    Args:
        schema (pa.DataFrameSchema): schema to extract the data types from.
        required_only (bool, optional): if True, only required columns are included.
            Defaults to True.

    Returns:
        dict: column name -> numpy dtype

    Example:
        >>> schema = pa.DataFrameSchema({
        ...     "i": pa.Column(int),
        ...     "name": pa.Column(str, nullable=True),
        ...     "vm": pa.Column(float, required=False)
        ... })
        >>> get_dtypes(schema)
        {'i': dtype('int64'), 'name': dtype('O')}
    """
    dtypes = {}
    for name, col in schema.columns.items():
        if required_only and not col.required:
            continue
        dtypes[name] = _table_dtype(col.dtype.type)
    return dtypes


def create_lower_equals_column_check(first_element: str, second_element: str) -> pa.Check:
    """
    Create a pandera check that validates one column is less than or equal to another.

    The check passes if the first column value is <= the second column value, if either value
    is NaN or if either column is missing from the DataFrame.
    """
    return pa.Check(
        lambda df: (
            df[first_element].fillna(-np.inf) <= df[second_element].fillna(np.inf)
            if all(col in df.columns for col in [first_element, second_element])
            else True
        ),
        error=f"Column '{first_element}' must be <= column '{second_element}'",
    )


def create_bus_reference_check(bus_numbers, column_name: str, element_name: str) -> pa.Check:
    """
    Creates a pandera check that validates that every value of a column is an existing raw bus
    number. Negative values are compared by their absolute value, since a negative to-bus
    marks the metered end of a branch.
    """
    reference = set(int(b) for b in bus_numbers)

    def check_values_in_bus_numbers(series: pd.Series) -> bool:
        mask = series.abs().isin(reference)
        if not mask.all():
            failing_values = series[~mask].unique()
            failing_indices = series.index[~mask].values.tolist()
            raise ValueError(
                f"The following values for net.{element_name}.{column_name} at index {failing_indices} "
                f"are not bus numbers of net.bus: {failing_values.tolist()}"
            )
        return True

    return pa.Check(check_values_in_bus_numbers, name=f"bus_reference_{element_name}_{column_name}")
