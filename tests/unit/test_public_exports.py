from __future__ import annotations

import cdg_api_client
import cdg_api_client.api as api


def test_package_exports_clients_config_enums_and_errors():
    expected = {
        "CdgClient",
        "AsyncCdgClient",
        "CdgClientConfig",
        "ApiKeyAuth",
        "Format",
        "BillType",
        "StateCode",
        "CdgApiError",
        "CdgHttpError",
        "CdgDataTypeError",
    }
    assert expected.issubset(set(cdg_api_client.__all__))
    for name in cdg_api_client.__all__:
        assert hasattr(cdg_api_client, name)
    assert "SyncTransport" not in cdg_api_client.__all__
    assert "QueryParams" not in cdg_api_client.__all__


def test_api_package_exposes_one_module_per_resource():
    assert {"bill", "amendment", "member", "treaty", "congressional_record"}.issubset(api.__all__)
    for name in api.__all__:
        module = getattr(api, name)
        for export in module.__all__:
            assert hasattr(module, export)
