from caseformat.converter.raw import from_raw, from_raw_many, to_raw
from caseformat.converter.matpower import to_mpc
