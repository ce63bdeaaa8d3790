import pytest

from app import create_app
from usage import InMemoryUsageStore


# Neutral supply contract: long enough to avoid the short-text penalty and
# free of every red-flag trigger.
NEUTRAL_CONTRACT = (
    "This supply agreement sets out how the Supplier delivers office furniture to the Buyer. "
    "The Supplier shall deliver each order to the address named in the order form. "
    "The Buyer shall inspect each delivery and report visible damage in writing. "
    "Prices are listed in the attached price schedule and include delivery. "
    "Invoices are payable within thirty days of delivery. "
    "Each party shall keep records of orders and deliveries for two years. "
    "Questions about an order are handled by the account managers named in the order form. "
    "Both parties will meet once per quarter to review delivery performance and open orders. "
)

RISKY_CONTRACT = """FREELANCE SERVICES AGREEMENT

This Agreement is made between Acme Corp (the "Client") and Jane Doe (the "Contractor") on January 5, 2024.

1. Services
The Contractor shall provide design services and unlimited revisions until the Client is satisfied.

2. Payment
The Client shall pay $5,000 per month. Invoices are payable Net-90.

3. Intellectual Property
The Contractor hereby irrevocably assigns all intellectual property rights in any work to the Client.

4. Liability
The Contractor shall indemnify, defend, and hold harmless the Client. The Contractor has unlimited liability.

5. Non-Compete
The Contractor agrees to a non-compete covering all of North America for 5 years.

6. Termination
The Client may terminate this Agreement at any time without cause.

7. Disputes
All disputes go to binding arbitration. This Agreement will automatically renew each year.
"""


@pytest.fixture
def neutral_contract():
    return NEUTRAL_CONTRACT


@pytest.fixture
def risky_contract():
    return RISKY_CONTRACT


@pytest.fixture
def usage_store():
    return InMemoryUsageStore()


@pytest.fixture
def app(usage_store):
    app = create_app(usage_store=usage_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
