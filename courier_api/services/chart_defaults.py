"""Default logistics chart of accounts seeded by POST /chart-of-accounts/initialize."""

_ASSET = ("Asset", "Increases", "Decreases")
_LIABILITY = ("Liability", "Decreases", "Increases")
_EQUITY = ("Equity", "Decreases", "Increases")
_EXPENSE = ("Expense", "Increases", "Decreases")
_REVENUE = ("Revenue", "Decreases", "Increases")

# (code, account name, type, description, (category, debit rule, credit rule))
_ROWS = [
    ("1101", "Cash", "Current Asset", "Physical cash and bank accounts", _ASSET),
    ("1102", "Accounts Receivable", "Current Asset",
     "Money owed by customers for transportation or logistics services", _ASSET),
    ("1103", "Fuel Inventory", "Current Asset", "Fuel stock for transportation vehicles", _ASSET),
    ("1104", "Spare Parts Inventory", "Current Asset",
     "Spare parts and accessories for vehicle maintenance", _ASSET),
    ("1105", "Fleet Vehicles", "Fixed Asset",
     "Trucks, vans, and other vehicles used for transportation", _ASSET),
    ("1106", "Warehousing Facilities", "Fixed Asset",
     "Storage warehouses used in logistics operations", _ASSET),
    ("1107", "Office Equipment", "Fixed Asset",
     "Office furniture, computers, and administrative equipment", _ASSET),
    ("1108", "Prepaid Insurance", "Prepayment",
     "Insurance premiums paid in advance for vehicles and cargo", _ASSET),
    ("1109", "Prepaid Rent", "Prepayment",
     "Advance rent payments for warehouses or office spaces", _ASSET),
    ("2101", "Accounts Payable", "Current Liability",
     "Money owed to suppliers, contractors, or vendors", _LIABILITY),
    ("2102", "Taxes Payable", "Current Liability",
     "Taxes owed to government authorities", _LIABILITY),
    ("2103", "Wages Payable", "Current Liability",
     "Unpaid salaries and wages owed to drivers and staff", _LIABILITY),
    ("2201", "Vehicle Loan Payable", "Non-Current Liability",
     "Long-term loans for purchasing fleet vehicles", _LIABILITY),
    ("2202", "Warehouse Mortgage Payable", "Non-Current Liability",
     "Mortgage loans for warehousing facilities", _LIABILITY),
    ("3101", "Owner's Equity", "Equity",
     "Owner's initial and additional investments in the business", _EQUITY),
    ("3102", "Retained Earnings", "Equity",
     "Cumulative profits retained in the business for reinvestment", _EQUITY),
    ("3103", "Current Year Earnings", "Equity", "Current year's net income or loss", _EQUITY),
    ("4101", "Depreciation Expense - Fleet Vehicles", "Depreciation",
     "Depreciation of trucks, vans, and other vehicles", _EXPENSE),
    ("4102", "Depreciation Expense - Warehousing Facilities", "Depreciation",
     "Depreciation of warehouses and storage facilities", _EXPENSE),
    ("4201", "Fuel Costs", "Direct Costs",
     "Expenses related to fuel consumption for fleet vehicles", _EXPENSE),
    ("4202", "Vehicle Maintenance", "Direct Costs",
     "Costs for repairing and maintaining fleet vehicles", _EXPENSE),
    ("4203", "Driver Salaries", "Direct Costs", "Wages paid to vehicle drivers", _EXPENSE),
    ("4301", "Warehouse Rent", "Overhead", "Rental costs for warehouses", _EXPENSE),
    ("4302", "Utilities Expense", "Overhead",
     "Electricity, water, and internet expenses for facilities", _EXPENSE),
    ("4303", "Administrative Salaries", "Overhead",
     "Salaries for administrative and office staff", _EXPENSE),
    ("4304", "Insurance Expense", "Overhead", "Insurance costs for vehicles and cargo", _EXPENSE),
    ("4305", "Vendor Expense", "Direct Costs",
     "Expenses paid to vendors for transportation and logistics services", _EXPENSE),
    ("5101", "Freight Revenue", "Revenue",
     "Revenue earned from freight and cargo transportation", _REVENUE),
    ("5102", "Logistics Services Revenue", "Revenue",
     "Revenue earned from logistics and warehousing services", _REVENUE),
    ("5103", "Vehicle Leasing Revenue", "Revenue",
     "Revenue earned from leasing vehicles to third parties", _REVENUE),
]

DEFAULT_ACCOUNTS: list[dict[str, str | bool]] = [
    {
        "code": code,
        "account_name": name,
        "category": category,
        "type": account_type,
        "debit_rule": debit_rule,
        "credit_rule": credit_rule,
        "description": description,
        "is_active": True,
    }
    for code, name, account_type, description, (category, debit_rule, credit_rule) in _ROWS
]
