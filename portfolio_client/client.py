"""
资产组合后端客户端 - 命令行入口
"""
import argparse
import json
import logging
import sys

from portfolio_client.api.asset_api import BuySellAPI, CryptoAPI, GoldAPI
from portfolio_client.api.base import configure
from portfolio_client.api.endpoints import ENDPOINTS
from portfolio_client.api.user_api import UserAPI
from portfolio_client.config import Config
from portfolio_client.errors import APIError, PortfolioClientError
from portfolio_client.locator import locate_backend, select_base_url
from portfolio_client.storage.file_store import FileTokenStore


class PortfolioClient:
    """组合请求句柄与各资源接口，所有接口共用同一个后端地址和 token 存储"""

    def __init__(self, base_url, token_store=None, session=None, timeout=None):
        self.api = configure(base_url, token_store=token_store, session=session, timeout=timeout)
        self.users = UserAPI(self.api)
        self.gold = GoldAPI(self.api)
        self.crypto = CryptoAPI(self.api)
        self.buysell = BuySellAPI(self.api)

    @property
    def base_url(self):
        return self.api.base_url

    @property
    def tokens(self):
        return self.api.tokens

    @classmethod
    def connect(cls, dev_url=None, prod_url=None, token_store=None, config=Config):
        """启动时探测一次后端，之后不再切换"""
        if dev_url or prod_url:
            base_url = select_base_url(dev_url or config.BACKEND_URL_DEV,
                                       prod_url or config.BACKEND_URL_PROD,
                                       timeout=config.HEALTH_TIMEOUT)
        else:
            base_url = locate_backend(config)
        if token_store is None:
            token_store = FileTokenStore(config.TOKEN_PATH)
        return cls(base_url, token_store=token_store, timeout=config.TIMEOUT)

    def close(self):
        self.api.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


ASSET_COMMANDS = {
    "gold": lambda cli: cli.gold.get_gold_assets(),
    "crypto": lambda cli: cli.crypto.get_cryptocurrency_assets(),
    "real-estate": lambda cli: cli.buysell.get_real_estate_assets(),
    "vehicles": lambda cli: cli.buysell.get_vehicle_assets(),
    "properties": lambda cli: cli.buysell.get_property_assets(),
}


def _credentials(args):
    data = {"username": args.username, "email": args.email, "password": args.password}
    return {k: v for k, v in data.items() if v is not None}


def build_parser():
    parser = argparse.ArgumentParser(prog="portfolio-client", description="Portfolio backend client")
    parser.add_argument("--dev-url", default=Config.BACKEND_URL_DEV, help="Development backend url")
    parser.add_argument("--prod-url", default=Config.BACKEND_URL_PROD, help="Production backend url")
    parser.add_argument("--token-path", default=Config.TOKEN_PATH, help="Token cache file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("probe", help="Print the selected backend url")

    login = sub.add_parser("login", help="Login and cache tokens")
    login.add_argument("--username")
    login.add_argument("--email")
    login.add_argument("--password", required=True)

    register = sub.add_parser("register", help="Register a new user")
    register.add_argument("--username", required=True)
    register.add_argument("--email", required=True)
    register.add_argument("--password", required=True)
    register.add_argument("--full-name")
    register.add_argument("--avatar", help="Avatar image path")
    register.add_argument("--cover-image", help="Cover image path")

    sub.add_parser("logout", help="Logout and clear cached tokens")
    sub.add_parser("refresh", help="Refresh the access token")
    sub.add_parser("me", help="Show the current user")
    sub.add_parser("endpoints", help="List the REST endpoints used by the client")

    password = sub.add_parser("change-password", help="Change the current password")
    password.add_argument("--old-password", required=True)
    password.add_argument("--new-password", required=True)

    account = sub.add_parser("update-account", help="Update full name and email")
    account.add_argument("--full-name", required=True)
    account.add_argument("--email", required=True)

    avatar = sub.add_parser("avatar", help="Upload a new avatar")
    avatar.add_argument("path")

    cover = sub.add_parser("cover-image", help="Upload a new cover image")
    cover.add_argument("path")

    assets = sub.add_parser("assets", help="List assets")
    assets.add_argument("kind", choices=sorted(ASSET_COMMANDS))
    return parser


def run(args, cli):
    if args.command == "probe":
        return cli.base_url
    if args.command == "login":
        return cli.users.login(_credentials(args))
    if args.command == "register":
        user_data = _credentials(args)
        if args.full_name:
            user_data["fullName"] = args.full_name
        return cli.users.register(user_data, avatar=args.avatar, cover_image=args.cover_image)
    if args.command == "logout":
        return cli.users.logout()
    if args.command == "refresh":
        return cli.users.refresh_access_token()
    if args.command == "me":
        return cli.users.get_current_user()
    if args.command == "change-password":
        return cli.users.change_current_password(
            {"oldPassword": args.old_password, "newPassword": args.new_password})
    if args.command == "update-account":
        return cli.users.update_account_details({"fullName": args.full_name, "email": args.email})
    if args.command == "avatar":
        return cli.users.update_user_avatar(args.path)
    if args.command == "cover-image":
        return cli.users.update_user_cover_image(args.path)
    return ASSET_COMMANDS[args.kind](cli)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=Config.LOG_LEVEL, format="[%(levelname)s] %(name)s: %(message)s")

    if args.command == "endpoints":
        # 不需要连接后端
        print(json.dumps([ep._asdict() for ep in ENDPOINTS.values()], indent=2))
        return 0

    try:
        cli = PortfolioClient.connect(
            dev_url=args.dev_url,
            prod_url=args.prod_url,
            token_store=FileTokenStore(args.token_path),
        )
        with cli:
            result = run(args, cli)
    except APIError as e:
        print(json.dumps(e.payload, ensure_ascii=False, indent=2), file=sys.stderr)
        return 1
    except (PortfolioClientError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
