"""
config.py

Static fixture data for the Swag Labs suite.

data/test_data.json is loaded once into frozen dataclasses, so a test cannot change the data
another test sees. The BASE_URL environment variable points the whole suite, URLs included,
at another deployment of the shop.
"""
import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "test_data.json"


@dataclass(frozen=True)
class User:
    username: str
    password: str
    description: str = ""


@dataclass(frozen=True)
class ProductData:
    name: str
    price: str
    description: str

    @property
    def price_value(self) -> float:
        return float(self.price.lstrip('$'))


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class Users:
    standard: User
    locked: User
    problem: User
    performance: User
    invalid: User


@dataclass(frozen=True)
class SortOptions:
    name_asc: str
    name_desc: str
    price_asc: str
    price_desc: str


@dataclass(frozen=True)
class CheckoutData:
    valid: CheckoutInfo
    invalid: CheckoutInfo
    special_characters: CheckoutInfo


@dataclass(frozen=True)
class Messages:
    locked_user_error: str
    invalid_credentials_error: str
    username_required_error: str
    password_required_error: str
    checkout_error: str
    last_name_required_error: str
    postal_code_required_error: str
    checkout_complete: str
    checkout_complete_message: str


@dataclass(frozen=True)
class PageTitles:
    login: str
    inventory: str
    cart: str
    checkout: str
    checkout_complete: str


@dataclass(frozen=True)
class Urls:
    login: str
    inventory: str
    cart: str
    checkout: str
    checkout_overview: str
    checkout_complete: str


@dataclass(frozen=True)
class TestData:
    """
    Everything the scenarios need to know about the shop: accounts, catalogue, sort values,
    checkout input, expected messages, titles and URLs.
    """
    __test__ = False

    base_url: str
    users: Users
    products: dict[str, ProductData]
    sort_options: SortOptions
    checkout_data: CheckoutData
    expected_messages: Messages
    page_titles: PageTitles
    urls: Urls

    @property
    def all_products(self) -> list[ProductData]:
        return list(self.products.values())

    def product(self, key: str) -> ProductData:
        """
        Look a product up by its key in the data file, e.g. "backpack".

        Raises:
            KeyError: If no product has that key.
        """
        return self.products[key]

    @classmethod
    def from_dict(cls, raw: dict, base_url: Optional[str] = None) -> "TestData":
        """
        Build the data set from the parsed JSON document.

        Args:
            raw: Parsed content of test_data.json.
            base_url: Replacement for the shop address; every URL in the document is rebased onto it.
        """
        default_base = raw["base_url"]
        target_base = base_url or default_base
        if not target_base.endswith('/'):
            target_base += '/'

        def rebase(url: str) -> str:
            return target_base + url[len(default_base):] if url.startswith(default_base) else url

        return cls(
            base_url=target_base,
            users=Users(**{key: User(**value) for key, value in raw["users"].items()}),
            products={key: ProductData(**value) for key, value in raw["products"].items()},
            sort_options=SortOptions(**raw["sort_options"]),
            checkout_data=CheckoutData(**{key: CheckoutInfo(**value)
                                          for key, value in raw["checkout_data"].items()}),
            expected_messages=Messages(**raw["expected_messages"]),
            page_titles=PageTitles(**raw["page_titles"]),
            urls=Urls(**{key: rebase(value) for key, value in raw["urls"].items()}),
        )


def load_test_data(path: Union[str, Path] = DATA_FILE, base_url: Optional[str] = None) -> TestData:
    """
    Read a fixture data file.

    Args:
        path: JSON file to read.
        base_url: Shop address to use instead of the one in the file. Defaults to the BASE_URL
            environment variable when that is set.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return TestData.from_dict(raw, base_url or os.getenv("BASE_URL") or None)


@lru_cache(maxsize=None)
def get_test_data(base_url: Optional[str] = None) -> TestData:
    """
    The default data set, read once per process.
    """
    return load_test_data(base_url=base_url)
