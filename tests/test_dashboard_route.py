def test_health(client):
  r = client.get("/health")

  assert r.status_code == 200
  assert r.json() == {"ok": True}


def test_cards_use_camel_case_keys(client, dashboard_rows):
  r = client.get("/api/cards")

  assert r.status_code == 200
  assert r.json() == {
    "numberOfCustomers": 3,
    "numberOfInvoices": 8,
    "totalPaidInvoices": "$170.00",
    "totalPendingInvoices": "$195.00",
  }


def test_latest_invoices(client, dashboard_rows):
  r = client.get("/api/invoices/latest")

  assert r.status_code == 200
  body = r.json()
  assert [row["id"] for row in body] == ["inv-08", "inv-07", "inv-06", "inv-05", "inv-04"]
  assert body[0]["amount"] == "$80.00"


def test_invoices_page_and_filter(client, dashboard_rows):
  r = client.get("/api/invoices", params={"query": "lee", "page": 1})

  assert r.status_code == 200
  body = r.json()
  assert [row["id"] for row in body] == ["inv-08", "inv-06", "inv-04", "inv-02"]
  assert body[0]["date"] == "2023-08-10"
  assert body[0]["customer"]["name"] == "Lee Robinson"


def test_invoices_page_must_be_positive(client, dashboard_rows):
  r = client.get("/api/invoices", params={"page": 0})

  assert r.status_code == 422


def test_invoices_pages(client, dashboard_rows):
  assert client.get("/api/invoices/pages").json() == {"total_pages": 2}
  assert client.get("/api/invoices/pages", params={"query": "zzz"}).json() == {"total_pages": 0}


def test_invoice_by_id(client, dashboard_rows):
  r = client.get("/api/invoices/inv-04")

  assert r.status_code == 200
  assert r.json() == {"id": "inv-04", "customer_id": "c-lee", "amount": 40.0, "status": "paid"}


def test_invoice_by_id_not_found(client, dashboard_rows):
  r = client.get("/api/invoices/inv-404")

  assert r.status_code == 404


def test_customers(client, dashboard_rows):
  r = client.get("/api/customers")

  assert [c["name"] for c in r.json()] == ["Amy Burns", "Lee Robinson", "Zoe Quinn"]


def test_customers_table(client, dashboard_rows):
  r = client.get("/api/customers/table", params={"query": "zoe"})

  assert r.json() == [{
    "id": "c-zoe",
    "name": "Zoe Quinn",
    "email": "zoe@example.com",
    "image_url": "/customers/zoe-quinn.png",
    "total_invoices": 0,
    "total_pending": "$0.00",
    "total_paid": "$0.00",
  }]


def test_fetch_error_becomes_500_with_generic_detail(client):
  r = client.get("/api/revenue")

  assert r.status_code == 500
  assert r.json() == {"detail": "Failed to fetch revenue data."}


def test_seed_only_when_empty(client):
  first = client.post("/api/seed")
  second = client.post("/api/seed")

  assert first.json() == {"ok": True, "seeded": True}
  assert second.json() == {"ok": True, "seeded": False}
  assert len(client.get("/api/revenue").json()) == 12
  assert client.get("/api/cards").json()["numberOfInvoices"] == 8
