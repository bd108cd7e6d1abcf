"""
Default chart of accounts.

The ERP ships with this chart; tenants extend it through the
admin screens. Drawings is deliberately DEBIT-normal under
EQUITY: it is a contra-equity account, not a data-entry error.
"""

from erp_ledger.models.enums import AccountType, BalanceSide
from erp_ledger.schemas.ledger import Account
from erp_ledger.services.catalog import ChartOfAccounts

ASSET = AccountType.ASSET
LIABILITY = AccountType.LIABILITY
EQUITY = AccountType.EQUITY
REVENUE = AccountType.REVENUE
EXPENSE = AccountType.EXPENSE
DEBIT = BalanceSide.DEBIT
CREDIT = BalanceSide.CREDIT


def _account(id, name, type, category, normal_balance, description=None):
    return Account(
        id=id,
        name=name,
        type=type,
        category=category,
        normal_balance=normal_balance,
        description=description,
    )


DEFAULT_CHART: tuple[Account, ...] = (
    # --- Assets ---
    _account("cash", "Cash on Hand", ASSET, "Current Asset", DEBIT,
             "Physical cash held by the company"),
    _account("bank", "Bank Account", ASSET, "Current Asset", DEBIT,
             "Funds held in business bank accounts"),
    _account("accounts-receivable", "Accounts Receivable", ASSET, "Current Asset", DEBIT,
             "Money owed by customers"),
    _account("inventory", "Inventory", ASSET, "Current Asset", DEBIT,
             "Stock of goods available for sale"),
    _account("furniture", "Furniture & Fixtures", ASSET, "Fixed Asset", DEBIT,
             "Long-term furniture for business operations"),
    _account("office-equipment", "Office Equipment", ASSET, "Fixed Asset", DEBIT,
             "Laptops, computers, and office machines"),
    _account("vehicles", "Vehicles", ASSET, "Fixed Asset", DEBIT,
             "Company owned vehicles"),
    _account("building", "Building & Land", ASSET, "Fixed Asset", DEBIT,
             "Real estate owned by the company"),

    # --- Liabilities ---
    _account("accounts-payable", "Accounts Payable", LIABILITY, "Current Liability", CREDIT,
             "Money owed to vendors/suppliers"),
    _account("salaries-payable", "Salaries Payable", LIABILITY, "Current Liability", CREDIT,
             "Wages owed to employees"),
    _account("tax-payable", "Tax Payable", LIABILITY, "Current Liability", CREDIT,
             "Taxes owed to the government"),
    _account("utilities-payable", "Utilities Payable", LIABILITY, "Current Liability", CREDIT,
             "Unpaid utility bills"),
    _account("bank-loan", "Bank Loan (Long Term)", LIABILITY, "Non-Current Liability", CREDIT,
             "Long term debt obligations"),

    # --- Equity ---
    _account("owners-capital", "Owner's Capital", EQUITY, "Equity", CREDIT,
             "Initial investment by the owner"),
    _account("drawings", "Drawings", EQUITY, "Equity", DEBIT,
             "Withdrawals by the owner for personal use"),
    _account("retained-earnings", "Retained Earnings", EQUITY, "Equity", CREDIT,
             "Profits reinvested in the business"),

    # --- Revenue ---
    _account("sales-revenue", "Sales Revenue", REVENUE, "Operating Revenue", CREDIT,
             "Income from selling goods"),
    _account("service-revenue", "Service Revenue", REVENUE, "Operating Revenue", CREDIT,
             "Income from providing services"),
    _account("interest-income", "Interest Income", REVENUE, "Non-Operating Revenue", CREDIT,
             "Income from bank interest"),

    # --- Expenses ---
    _account("cost-of-goods-sold", "Cost of Goods Sold", EXPENSE, "Direct Expense", DEBIT,
             "Direct costs of producing goods sold"),
    _account("rent-expense", "Rent Expense", EXPENSE, "Operating Expense", DEBIT),
    _account("salary-expense", "Salary Expense", EXPENSE, "Operating Expense", DEBIT),
    _account("utilities-expense", "Utilities Expense", EXPENSE, "Operating Expense", DEBIT),
    _account("marketing-expense", "Marketing Expense", EXPENSE, "Operating Expense", DEBIT),
    _account("purchases", "Purchases", EXPENSE, "Direct Expense", DEBIT,
             "Purchase of goods for resale"),
    _account("office-supplies", "Office Supplies", EXPENSE, "Operating Expense", DEBIT),
)


def default_catalog() -> ChartOfAccounts:
    return ChartOfAccounts(DEFAULT_CHART)
