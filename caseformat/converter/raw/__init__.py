from caseformat.converter.raw.from_raw import from_raw, from_raw_many
from caseformat.converter.raw.to_raw import to_raw
