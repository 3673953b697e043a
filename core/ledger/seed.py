"""
원장 시드 데이터

프로세스 시작 시 LedgerStore 구성에 사용하는 고정 데이터.
"""

from datetime import date
from decimal import Decimal

from core.ledger.types import LedgerEntrySeed, Party


SEED_PARTIES: tuple[Party, ...] = (
    Party(
        id="abc-co",
        name="ABC Company Ltd",
        email="accounts@abccompany.com",
        phone="+91 9830012345",
        address="15B Park Street, Kolkata",
    ),
    Party(
        id="xyz-traders",
        name="XYZ Traders",
        email="finance@xyztraders.in",
        phone="+91 9988776655",
        address="7 MG Road, Bengaluru",
    ),
    Party(
        id="prime-industries",
        name="Prime Industries Pvt Ltd",
        email="ap@primeindustries.in",
        phone="+91 8877665544",
        address="Plot 21, MIDC, Pune",
    ),
)


SEED_ENTRIES: tuple[LedgerEntrySeed, ...] = (
    LedgerEntrySeed(
        id="entry-1",
        party_id="abc-co",
        date=date(2024, 4, 5),
        reference="SA/24-0001",
        particulars="Sales Invoice",
        credit=Decimal("152000"),
    ),
    LedgerEntrySeed(
        id="entry-2",
        party_id="abc-co",
        date=date(2024, 5, 2),
        reference="RC/24-0009",
        particulars="Receipt",
        debit=Decimal("152000"),
    ),
    LedgerEntrySeed(
        id="entry-3",
        party_id="xyz-traders",
        date=date(2024, 4, 10),
        reference="SA/24-0010",
        particulars="Sales Invoice",
        credit=Decimal("84500"),
    ),
    LedgerEntrySeed(
        id="entry-4",
        party_id="xyz-traders",
        date=date(2024, 5, 15),
        reference="RC/24-0022",
        particulars="Receipt",
        debit=Decimal("50000"),
    ),
    LedgerEntrySeed(
        id="entry-5",
        party_id="prime-industries",
        date=date(2024, 4, 18),
        reference="SA/24-0025",
        particulars="Sales Invoice",
        credit=Decimal("193400"),
    ),
)
