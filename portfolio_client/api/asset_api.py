# portfolio_client/api/asset_api.py
from portfolio_client.api import endpoints


class _AssetAPI:
    def __init__(self, api):
        self.api = api


class GoldAPI(_AssetAPI):
    def get_gold_assets(self):
        return self.api.call(endpoints.GOLD_ASSETS)


class CryptoAPI(_AssetAPI):
    def get_cryptocurrency_assets(self):
        return self.api.call(endpoints.CRYPTO_ASSETS)


class BuySellAPI(_AssetAPI):
    """买卖市场：房地产、车辆、物业"""

    def get_real_estate_assets(self):
        return self.api.call(endpoints.REAL_ESTATE_ASSETS)

    def get_vehicle_assets(self):
        return self.api.call(endpoints.VEHICLE_ASSETS)

    def get_property_assets(self):
        return self.api.call(endpoints.PROPERTY_ASSETS)
