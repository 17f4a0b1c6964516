# portfolio_client/api/endpoints.py
from collections import namedtuple

# 认证方式
AUTH_NONE = "none"          # 不附带任何认证信息
AUTH_BEARER = "bearer"      # 显式附带 Authorization: Bearer <accessToken>
AUTH_IMPLICIT = "implicit"  # 依赖客户端级状态（session cookie / 默认请求头）

Endpoint = namedtuple("Endpoint", ["name", "method", "path", "auth", "multipart_field"])


def _ep(name, method, path, auth=AUTH_IMPLICIT, multipart_field=None):
    return Endpoint(name, method, path, auth, multipart_field)


# ---------- 用户 ----------
LOGIN = _ep("login", "POST", "/users/login", AUTH_NONE)
REGISTER = _ep("register", "POST", "/users/register", AUTH_NONE)
LOGOUT = _ep("logout", "POST", "/users/logout", AUTH_BEARER)
REFRESH_TOKEN = _ep("refresh_access_token", "POST", "/users/refresh-token", AUTH_NONE)
CHANGE_PASSWORD = _ep("change_current_password", "POST", "/users/change-password")
CURRENT_USER = _ep("get_current_user", "GET", "/users/current-user", AUTH_BEARER)
UPDATE_ACCOUNT = _ep("update_account_details", "PATCH", "/users/update-account")
UPDATE_AVATAR = _ep("update_user_avatar", "PATCH", "/users/avatar", multipart_field="avatar")
UPDATE_COVER_IMAGE = _ep("update_user_cover_image", "PATCH", "/users/cover-image",
                         multipart_field="coverImage")

# ---------- 资产 ----------
GOLD_ASSETS = _ep("get_gold_assets", "GET", "/gold/assets")
CRYPTO_ASSETS = _ep("get_cryptocurrency_assets", "GET", "/cryptocurrency/assets")
REAL_ESTATE_ASSETS = _ep("get_buy_sell_real_estate_assets", "GET", "/buy-sell/real-estate/assets")
VEHICLE_ASSETS = _ep("get_buy_sell_vehicle_assets", "GET", "/buy-sell/vehicles/assets")
PROPERTY_ASSETS = _ep("get_buy_sell_property_assets", "GET", "/buy-sell/properties/assets")

ENDPOINTS = {
    ep.name: ep
    for ep in (
        LOGIN, REGISTER, LOGOUT, REFRESH_TOKEN, CHANGE_PASSWORD, CURRENT_USER,
        UPDATE_ACCOUNT, UPDATE_AVATAR, UPDATE_COVER_IMAGE,
        GOLD_ASSETS, CRYPTO_ASSETS, REAL_ESTATE_ASSETS, VEHICLE_ASSETS, PROPERTY_ASSETS,
    )
}
