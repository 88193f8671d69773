from enum import Enum

class ValidationStatus(str, Enum):
    success = "success"
    not_found = "not_found"
    invalid_amount_of_characters = "invalid_amount_of_characters"
    invalid_amount = "invalid_amount"
    no_data_to_make_analysis = "no_data_to_make_analysis"
