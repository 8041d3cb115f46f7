from .testtable import Record, reflect_test_table, to_record
