from main import customer_round_trip, list_customers, list_products, shipper_round_trip
from models.customer import Customer


def test_list_customers(customer_repo):
    customer_repo.add(Customer(customer_id="ALFKI", company_name="Alfreds Futterkiste"))
    customer_repo.add(Customer(customer_id="ANATR", company_name="Ana Trujillo Emparedados"))
    assert [c.customer_id for c in list_customers(customer_repo)] == ["ALFKI", "ANATR"]


def test_round_trips_leave_no_rows_behind(customer_repo, shipper_repo, fake_db):
    customer_round_trip(customer_repo)
    shipper_round_trip(shipper_repo)
    assert customer_repo.count() == 0
    assert shipper_repo.count() == 0
    assert fake_db.released == fake_db.acquired


def test_list_products_empty(product_repo):
    assert list_products(product_repo) == []
