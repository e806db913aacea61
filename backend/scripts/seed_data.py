"""
Seed script to load the reference companies and, optionally, demo invoices
"""
import sys
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from app.database import SessionLocal, engine, Base
from app.models.company import Company
from app.schemas.invoice import InvoiceDraft, ClientDraft, InvoiceItemDraft
from app.models.invoice import InvoiceType
from app.services.invoice_service import invoice_service
from decimal import Decimal
from faker import Faker

fake = Faker("fr_FR")

REFERENCE_COMPANIES = [
    {
        "id": "ets-mlf",
        "name": "ETS MLF",
        "display_name": "ETS MLF",
        "business_type": "COMMERCE GENERALE",
        "address": "sise au grand marché central de labé",
        "nif": "000000000",
        "registration_numbers": "NºFORMALITÉ/RCCM/GN.TCC.2024.00000 NºENTREPRISE/RCCM/GN.TCC.2024.A.00000",
        "phone": "(+224) 620 00 00 00",
        "email": "contact@example.com",
        "markup_percentage": Decimal("0"),
        "template_id": "template_standard",
        "is_default": True,
    },
    {
        "id": "mouctar",
        "name": "MOUCTAR & FRÈRES",
        "display_name": "MOUCTAR & FRÈRES",
        "business_type": "Commerce Generale",
        "address": "sise au grand marché centrale de labe",
        "phone": "(+224) 620 00 00 00",
        "email": "contact@example.com",
        "markup_percentage": Decimal("0"),
        "template_id": "template_standard",
        "is_default": False,
    },
    {
        "id": "thiernodjo",
        "name": "LES BOUTIQUES THIERNODJO & FRERE",
        "display_name": "LES BOUTIQUES THIERNODJO & FRERE",
        "business_type": "Commerce Generale",
        "address": "sise au grand marché centrale de labé",
        "phone": "(+224) 622 00 00 00",
        "email": "",
        "markup_percentage": Decimal("15"),
        "template_id": "template_moderne_blue",
        "is_default": False,
    },
]


def create_companies(db: Session) -> list[Company]:
    """Insert reference companies that are not present yet"""
    companies = []
    for data in REFERENCE_COMPANIES:
        company = db.get(Company, data["id"])
        if company is None:
            company = Company(**data)
            db.add(company)
            print(f"  Added company {data['display_name']}")
        companies.append(company)
    db.commit()
    return companies


def create_invoices(db: Session, companies: list[Company], owner_id: str, count: int = 10):
    """Create demo invoices through the regular save workflow so counters advance"""
    for _ in range(count):
        company = fake.random_element(elements=companies)
        items = []
        for _ in range(fake.random_int(min=1, max=5)):
            quantity = Decimal(fake.random_int(min=1, max=50))
            unit_price = Decimal(fake.random_int(min=2, max=200) * 500)
            items.append(InvoiceItemDraft(
                designation=fake.word(),
                quantity=quantity,
                unit=fake.random_element(elements=("sac", "carton", "pièce", None)),
                unit_price=unit_price,
            ))

        total = sum((item.quantity * item.unit_price for item in items), Decimal("0"))
        draft = InvoiceDraft(
            type=fake.random_element(elements=list(InvoiceType)),
            client=ClientDraft(name=fake.name(), address=fake.city()),
            items=items,
            amount_paid=Decimal(fake.random_int(min=0, max=int(total) // 500) * 500),
        )
        result = invoice_service.save_invoice(db, owner_id, draft, company.id, total)
        print(f"  Created invoice {result.number} for {company.display_name}")


def main():
    parser = argparse.ArgumentParser(description="Seed companies and demo invoices")
    parser.add_argument("--invoices", type=int, default=0, help="Number of demo invoices to create")
    parser.add_argument("--owner", default="demo-user", help="Owner of the demo invoices")
    args = parser.parse_args()

    # Create tables if they don't exist
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        print("Creating companies...")
        companies = create_companies(db)
        print(f"Ready: {len(companies)} companies")

        if args.invoices:
            print(f"Creating {args.invoices} demo invoices...")
            create_invoices(db, companies, args.owner, args.invoices)

        print("\nSeed data created successfully!")
    except Exception as e:
        print(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
