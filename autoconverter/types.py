ContractName = str

# Address as read from a constants file; not checksummed or validated.
Address = str
