"""Tests for the resource namespaces and their paths."""

from unittest.mock import patch

import httpx
import pytest

from forte import ForteClient, InvalidArgumentError, InvalidScopeError

BASE = "https://api.powerchord.io"


@pytest.fixture
def mock_request():
    with patch.object(httpx.Client, "request", return_value=httpx.Response(200, json={})) as mock:
        yield mock


def sent(mock_request):
    method, url = mock_request.call_args[0]
    return method, url, mock_request.call_args[1]


class TestOrganizations:
    def test_get_many(self, client, mock_request):
        client.organizations.get_many({"status": "active"})
        method, url, kwargs = sent(mock_request)
        assert (method, url) == ("GET", f"{BASE}/organizations/")
        assert kwargs["params"] == {"status": "active"}

    def test_get_one(self, client, mock_request):
        client.organizations.get_one("org-1")
        assert sent(mock_request)[:2] == ("GET", f"{BASE}/organizations/org-1")

    def test_get_one_by_hostname(self, client, mock_request):
        client.organizations.get_one_by_hostname("dealer.client.us")
        method, url, kwargs = sent(mock_request)
        assert url == f"{BASE}/organizations"
        assert kwargs["params"] == {"hostname": "dealer.client.us"}

    @pytest.mark.parametrize(
        ("organization_id", "encoded"),
        [("a/b", "a%2Fb"), ("x?y=1", "x%3Fy%3D1"), ("o#1", "o%231"), ("o\x01", "o%01"), ("ü", "%C3%BC")],
    )
    def test_get_one_encodes_id_as_one_segment(self, client, mock_request, organization_id, encoded):
        client.organizations.get_one(organization_id)
        assert sent(mock_request)[1] == f"{BASE}/organizations/{encoded}"

    @pytest.mark.parametrize("bad_filter", [None, {}, "status=active", []])
    def test_get_many_requires_filter(self, client, bad_filter):
        with pytest.raises(InvalidArgumentError):
            client.organizations.get_many(bad_filter)

    @pytest.mark.parametrize("bad_id", [None, "", "  ", 1])
    def test_get_one_requires_id(self, client, bad_id):
        with pytest.raises(InvalidArgumentError):
            client.organizations.get_one(bad_id)


class TestScopedResources:
    def test_locations(self, client, mock_request):
        client.locations.get_many({"near": "60601"})
        assert sent(mock_request)[1] == f"{BASE}/forte/organizations/acme/north/locations/"
        client.locations.get_one("loc-1")
        assert sent(mock_request)[1] == f"{BASE}/forte/organizations/acme/north/locations/loc-1"

    def test_content(self, client, mock_request):
        client.content.get_many("products", {"limit": 5})
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/content/products/"
        client.content.get_one("products", "p-1")
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/content/products/p-1"

    def test_content_requires_type(self, client):
        with pytest.raises(InvalidArgumentError):
            client.content.get_one("", "p-1")

    def test_put_form_document(self, client, mock_request):
        client.content.put_form_document({"form": "contact"})
        method, url, kwargs = sent(mock_request)
        assert (method, url) == ("PUT", f"{BASE}/forte/organizations/acme/content/forms/documents")
        assert kwargs["json"] == {"form": "contact"}

    def test_composite_query(self, client, mock_request):
        client.composite.query({"locations": {}})
        method, url, kwargs = sent(mock_request)
        assert (method, url) == ("POST", f"{BASE}/forte/composite/acme/north/")
        assert kwargs["json"] == {"locations": {}}

    def test_metrics(self, client, mock_request):
        client.metrics.record({"event": "view"})
        assert sent(mock_request)[:2] == ("POST", f"{BASE}/forte/metrics/acme/north/")

    def test_search_and_locator(self, client, mock_request):
        client.search.query({"q": "boots"})
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/search/"
        client.locator.find({"zip": "60601"})
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/locator/"

    def test_experience(self, client, mock_request):
        client.experience.session()
        assert sent(mock_request)[1] == f"{BASE}/session/check"
        client.experience.bootstrap("exp-1")
        assert sent(mock_request)[1] == f"{BASE}/forte/bootstrap/exp-1"

    def test_branch_required(self, mock_request):
        with ForteClient({"bearer_token": "valid"}, {"hostname": "h", "trunk": "acme"}) as client:
            with pytest.raises(InvalidScopeError):
                client.locations.get_one("loc-1")
            client.organizations.get_one("org-1")
        mock_request.assert_called_once()

    def test_branch_client_uses_new_branch(self, client, mock_request):
        branch_client = client.with_branch("south")
        branch_client.content.get_one("products", "p-1")
        branch_client.close()
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/south/content/products/p-1"


class TestCarts:
    CART = f"{BASE}/forte/acme/north/carts/cart-1"

    def test_create(self, client, mock_request):
        client.carts.create()
        method, url, kwargs = sent(mock_request)
        assert (method, url) == ("POST", f"{BASE}/forte/acme/north/carts/")
        assert kwargs["json"] == {}

    def test_get_update_delete(self, client, mock_request):
        client.carts.get("cart-1")
        assert sent(mock_request)[:2] == ("GET", self.CART)
        client.carts.update("cart-1", {"currency": "USD"})
        assert sent(mock_request)[:2] == ("PATCH", self.CART)
        client.carts.delete("cart-1")
        assert sent(mock_request)[:2] == ("DELETE", self.CART)

    def test_items(self, client, mock_request):
        client.carts.items.add("cart-1", {"sku": "A", "quantity": 1})
        assert sent(mock_request)[:2] == ("POST", f"{self.CART}/items/")
        client.carts.items.update("cart-1", "item-1", {"quantity": 2})
        assert sent(mock_request)[:2] == ("PUT", f"{self.CART}/items/item-1")
        client.carts.items.remove("cart-1", "item-1")
        assert sent(mock_request)[:2] == ("DELETE", f"{self.CART}/items/item-1")

    def test_contacts(self, client, mock_request):
        client.carts.contacts.add("cart-1", {"email": "a@b.c"})
        assert sent(mock_request)[:2] == ("POST", f"{self.CART}/contacts/")
        client.carts.contacts.remove("cart-1", "c-1")
        assert sent(mock_request)[:2] == ("DELETE", f"{self.CART}/contacts/c-1")

    def test_addresses(self, client, mock_request):
        client.carts.bill_to.set("cart-1", {"zip": "60601"})
        assert sent(mock_request)[:2] == ("PUT", f"{self.CART}/billto")
        client.carts.ship_to.get("cart-1")
        assert sent(mock_request)[:2] == ("GET", f"{self.CART}/shipto")

    def test_checkout_and_confirmation(self, client, mock_request):
        client.carts.checkout("cart-1", {"payment": "token"})
        method, url, kwargs = sent(mock_request)
        assert (method, url) == ("POST", f"{self.CART}/checkout")
        assert kwargs["json"] == {"payment": "token"}
        client.carts.confirmation("cart-1")
        assert sent(mock_request)[:2] == ("GET", f"{self.CART}/confirmation")

    def test_invalid_payload_raises(self, client):
        with pytest.raises(InvalidArgumentError):
            client.carts.items.add("cart-1", ["sku"])
        with pytest.raises(InvalidArgumentError):
            client.carts.get("")


class TestPathEncoding:
    def test_scoped_ids_are_encoded(self, client, mock_request):
        client.content.get_one("news/posts", "2024/01")
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/content/news%2Fposts/2024%2F01"
        client.carts.items.remove("cart 1", "item?1")
        assert sent(mock_request)[1] == f"{BASE}/forte/acme/north/carts/cart%201/items/item%3F1"

    def test_scope_segments_are_encoded(self, mock_request):
        with ForteClient({"bearer_token": "valid"}, {"hostname": "h", "trunk": "a/b", "branch": "n s"}) as client:
            client.search.query({"q": "boots"})
        assert sent(mock_request)[1] == f"{BASE}/forte/a%2Fb/n%20s/search/"
