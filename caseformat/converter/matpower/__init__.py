from caseformat.converter.matpower.to_mpc import to_mpc
