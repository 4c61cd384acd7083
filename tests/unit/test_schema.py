"""Tests for sfrest.schema."""

from sfrest.schema import describe_object, list_objects, object_schema, salesforce_resources

DESCRIBE = {
    "name": "Account",
    "fields": [
        {"name": "Id", "type": "id", "label": "Account ID", "length": 18},
        {"name": "Name", "type": "string", "label": "Account Name", "length": 255},
        {"name": "CreatedDate", "type": "datetime", "label": "Created Date", "length": 0},
        {"name": "Region", "type": "string", "label": "Region", "length": 40},
        {"name": "Region__c", "type": "picklist", "label": "Sales Region", "length": 255},
    ],
}


class TestObjectSchema:
    def test_default_projection_is_type(self, token, fake_transport):
        transport = fake_transport(DESCRIBE)

        schema = object_schema(token, "account", transport=transport)

        assert schema == {
            "id": "id",
            "name": "string",
            "created-date": "datetime",
            "region__s": "string",
            "region": "picklist",
        }
        assert transport.sent[0].url == (
            "https://example.my.salesforce.com/services/data/v60.0/sobjects/Account/describe"
        )

    def test_single_property(self, token, fake_transport):
        schema = object_schema(token, "Account", prop="label", transport=fake_transport(DESCRIBE))
        assert schema["region"] == "Sales Region"

    def test_property_set(self, token, fake_transport):
        schema = object_schema(
            token, "Account", prop=("type", "length"), transport=fake_transport(DESCRIBE)
        )
        assert schema["name"] == {"type": "string", "length": 255}

    def test_full_descriptor(self, token, fake_transport):
        schema = object_schema(token, "Account", prop=None, transport=fake_transport(DESCRIBE))
        assert schema["id"] == DESCRIBE["fields"][0]

    def test_raw_keeps_salesforce_names(self, token, fake_transport):
        schema = object_schema(token, "Account", raw=True, transport=fake_transport(DESCRIBE))
        assert list(schema) == ["Id", "Name", "CreatedDate", "Region", "Region__c"]

    def test_exclude_system_fields(self, token, fake_transport):
        schema = object_schema(
            token, "Account", include_system=False, transport=fake_transport(DESCRIBE)
        )
        assert schema == {"region__s": "string", "region": "picklist"}

    def test_collisions_computed_over_surviving_fields(self, token, fake_transport):
        describe = {
            "fields": [
                {"name": "Name", "type": "string"},
                {"name": "Name__c", "type": "string"},
            ]
        }
        with_sys = object_schema(token, "Widget", transport=fake_transport(describe))
        without_sys = object_schema(
            token, "Widget", include_system=False, transport=fake_transport(describe)
        )

        assert with_sys == {"name__s": "string", "name": "string"}
        assert without_sys == {"name": "string"}


def test_describe_object_keeps_raw_keys(token, fake_transport):
    transport = fake_transport(DESCRIBE)
    assert describe_object(token, "invoice", transport=transport) is DESCRIBE
    assert transport.sent[0].url.endswith("/sobjects/Invoice__c/describe")


def test_list_objects_filters(token, fake_transport):
    sobjects = {
        "sobjects": [
            {"name": "Account", "queryable": True},
            {"name": "Invoice__c", "queryable": True},
            {"name": "Contact", "queryable": True},
        ]
    }

    assert len(list_objects(token, transport=fake_transport(sobjects))) == 3
    filtered = list_objects(token, "account", "invoice", transport=fake_transport(sobjects))
    assert [s["name"] for s in filtered] == ["Account", "Invoice__c"]


def test_salesforce_resources(token, fake_transport):
    transport = fake_transport({"sobjects": "/services/data/v60.0/sobjects"})
    assert "sobjects" in salesforce_resources(token, transport=transport)
    assert transport.sent[0].url.endswith("/services/data/v60.0/")
