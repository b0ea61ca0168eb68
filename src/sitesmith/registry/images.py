"""
Hero image sets per canonical industry.

Each industry maps image categories (``primary`` always, optionally
``interior``, ``products``, ``food`` or ``team``) to ordered Unsplash URLs
sized for full-width heroes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=1920"


def _urls(*photo_ids: str) -> Tuple[str, ...]:
    return tuple(_UNSPLASH.format(photo_id) for photo_id in photo_ids)


HERO_IMAGES: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "bakery": MappingProxyType({
        "primary": _urls("1509440159596-0249088772ff", "1486427944544-d2c6128c6e75",
                         "1555507036-ab1f4038808a", "1517433670267-30f41c91c6c0"),
        "interior": _urls("1441986300917-64674bd600d8", "1568254183919-78a4f43a2877"),
        "products": _urls("1558961363-fa8fdf82db35", "1587668178277-295251f900ce", "1464349095431-e9a21285b5f3"),
    }),
    "cake-shop": MappingProxyType({
        "primary": _urls("1578985545062-69928b1d9587", "1558961363-fa8fdf82db35",
                         "1535141192574-5d4897c12636", "1464349095431-e9a21285b5f3"),
        "products": _urls("1587668178277-295251f900ce", "1606890737304-57a1ca8a5b62", "1562440499-64c9a111f713"),
    }),
    "coffee-cafe": MappingProxyType({
        "primary": _urls("1495474472287-4d71bcdd2085", "1501339847302-ac426a4a7cbb",
                         "1442512595331-e89e73853f31", "1509042239860-f550ce710b93"),
        "interior": _urls("1554118811-1e0d58224f24", "1453614512568-c4024d13c247"),
        "products": _urls("1461023058943-07fcbe16d735", "1485808191679-5f86510681a2"),
    }),
    "restaurant": MappingProxyType({
        "primary": _urls("1517248135467-4c7edcad34c4", "1414235077428-338989a2e8c0",
                         "1550966871-3ed3cdb5ed0c", "1559339352-11d035aa65de"),
        "food": _urls("1504674900247-0877df9cc836", "1567620905732-2d1ec7ab7445", "1546069901-ba9599a7e63c"),
    }),
    "pizza-restaurant": MappingProxyType({
        "primary": _urls("1513104890138-7c749659a591", "1565299624946-b28f40a0ae38",
                         "1571407970349-bc81e7e96d47", "1604382354936-07c5d9983bd3"),
        "interior": _urls("1555396273-367ea4eb4db5"),
    }),
    "steakhouse": MappingProxyType({
        "primary": _urls("1544025162-d76694265947", "1558030006-450675393462",
                         "1600891964092-4316c288032e", "1546833998-877b37c2e5c6"),
    }),
    "dental": MappingProxyType({
        "primary": _urls("1629909613654-28e377c37b09", "1588776814546-1ffcf47267a5", "1606811841689-23dfddce3e95"),
        "team": _urls("1612349317150-e413f6a5b16d"),
    }),
    "healthcare": MappingProxyType({
        "primary": _urls("1519494026892-80bbd2d6fd0d", "1631217868264-e5b90bb7e133", "1579684385127-1ef15d508118"),
    }),
    "chiropractic": MappingProxyType({
        "primary": _urls("1544161515-4ab6ce6db874", "1579684385127-1ef15d508118", "1571019613454-1cb2f99b2d8b"),
    }),
    "salon-spa": MappingProxyType({
        "primary": _urls("1560066984-138dadb4c035", "1522337360788-8b13dee7a37e", "1600948836101-f9ffda59d250"),
        "interior": _urls("1633681926022-84c23e8cb2d6", "1540555700478-4be289fbecef"),
    }),
    "barbershop": MappingProxyType({
        "primary": _urls("1503951914875-452162b0f3f1", "1621605815971-fbc98d665033", "1599351431202-1e0f0137899a"),
        "interior": _urls("1521590832167-7bcbfaa6381f"),
    }),
    "fitness-gym": MappingProxyType({
        "primary": _urls("1534438327276-14e5300c3a48", "1571902943202-507ec2618e8f", "1540497077202-7c8a3999166f"),
        "team": _urls("1571019614242-c5c5dee9f50b"),
    }),
    "yoga": MappingProxyType({
        "primary": _urls("1544367567-0f2fcb009e0b", "1599901860904-17e6ed7083a0", "1506126613408-eca07ce68773"),
        "interior": _urls("1588286840104-8957b019727f"),
    }),
    "law-firm": MappingProxyType({
        "primary": _urls("1589829545856-d10d557cf95f", "1479142506502-19b3a3b7ff33", "1450101499163-c8848c66ca85"),
        "team": _urls("1556157382-97edd2f9e3a0"),
    }),
    "real-estate": MappingProxyType({
        "primary": _urls("1560518883-ce09059eeffa", "1512917774080-9991f1c4c750", "1600596542815-ffad4c1539a9"),
        "interior": _urls("1502672260266-1c1ef2d93688"),
    }),
    "accounting": MappingProxyType({
        "primary": _urls("1554224155-8d04cb21cd6c", "1486406146926-c627a92ad1ab", "1454165804606-c3d57bc86b40"),
    }),
    "consulting": MappingProxyType({
        "primary": _urls("1552664730-d307ca884978", "1517245386807-bb43f82c33c4", "1522071820081-009f0129c71c"),
    }),
    "auto-shop": MappingProxyType({
        "primary": _urls("1486262715619-67b85e0b08d3", "1619642751034-765dfdf7c58e", "1625047509248-ec889cbff17f"),
    }),
    "plumber": MappingProxyType({
        "primary": _urls("1585704032915-c3400ca199e7", "1607472586893-edb57bdc0e39"),
        "team": _urls("1621905251189-08b45d6a269e"),
    }),
    "electrician": MappingProxyType({
        "primary": _urls("1621905252507-b35492cc74b4", "1621905251918-48416bd8575a", "1558618666-fcd25c85cd64"),
    }),
    "hvac": MappingProxyType({
        "primary": _urls("1585771724684-38269d6639fd", "1631545806609-23a8e8eb4c2a", "1504328345606-18bbc8c9d7d1"),
    }),
    "landscaping": MappingProxyType({
        "primary": _urls("1564013799919-ab600027ffc6", "1581092918056-0c4c3acd3789", "1504307651254-35680f356dfd"),
    }),
    "roofing": MappingProxyType({
        "primary": _urls("1504307651254-35680f356dfd", "1564013799919-ab600027ffc6", "1581092918056-0c4c3acd3789"),
    }),
    "cleaning": MappingProxyType({
        "primary": _urls("1581578731548-c64695cc6952", "1628177142898-93e36e4e3a50"),
    }),
    "saas": MappingProxyType({
        "primary": _urls("1460925895917-afdab827c52f", "1551288049-bebda4e38f71", "1522071820081-009f0129c71c"),
    }),
    "agency": MappingProxyType({
        "primary": _urls("1559136555-9303baea8ebd", "1542744094-3a31f272c490", "1454165804606-c3d57bc86b40"),
    }),
    "default": MappingProxyType({
        "primary": _urls("1497366216548-37526070297c", "1497366811353-6870744d04b2", "1486406146926-c627a92ad1ab"),
    }),
})
