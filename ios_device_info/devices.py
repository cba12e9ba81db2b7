# Bundled device catalog, in the same document format that
# JsonCatalogSource and http_get_catalog accept.
#
# Names follow the system's device type descriptions, with generation
# numbers added where the official name alone is ambiguous ("iPad 3").
# Icon references are file names relative to a DirectoryResourceStore.

from typing import Any, Dict

DEVICE_CATALOG: Dict[str, Any] = {
    "devices": [
        # iPhone
        {
            "identifiers": ["iPhone1,1"],
            "name": "iPhone",
            "icons": {"default": "iphone.png"},
        },
        {
            "identifiers": ["iPhone1,2"],
            "name": "iPhone 3G",
            "colors": ["black", "white"],
            "icons": {"default": "iphone-3g.png"},
        },
        {
            "identifiers": ["iPhone2,1"],
            "name": "iPhone 3GS",
            "colors": ["black", "white"],
            "icons": {"default": "iphone-3gs.png"},
        },
        {
            "identifiers": ["iPhone3,1", "iPhone3,2"],
            "name": "iPhone 4 (GSM)",
            "colors": ["black", "white"],
            "icons": {
                "default": "iphone-4-black.png",
                "black": "iphone-4-black.png",
                "white": "iphone-4-white.png",
            },
        },
        {
            "identifiers": ["iPhone3,3"],
            "name": "iPhone 4 (CDMA)",
            "colors": ["black", "white"],
            "icons": {
                "default": "iphone-4-black.png",
                "black": "iphone-4-black.png",
                "white": "iphone-4-white.png",
            },
        },
        {
            "identifiers": ["iPhone4,1"],
            "name": "iPhone 4s",
            "colors": ["black", "white"],
            "icons": {
                "default": "iphone-4s-black.png",
                "black": "iphone-4s-black.png",
                "white": "iphone-4s-white.png",
            },
        },
        {
            "identifiers": ["iPhone5,1"],
            "name": "iPhone 5 (Model A1428)",
            "colors": ["#3b3b3c", "#f5f4f7"],
        },
        {
            "identifiers": ["iPhone5,2"],
            "name": "iPhone 5 (Model A1429, A1442)",
            "colors": ["#3b3b3c", "#f5f4f7"],
        },
        {
            "identifiers": ["iPhone5,3", "iPhone5,4"],
            "name": "iPhone 5c",
            "colors": [
                "#f5f4f7",
                "#46abe0",
                "#c6353f",
                "#faf189",
                "#fe767a",
                "#a1e877",
            ],
        },
        {
            "identifiers": ["iPhone6,1", "iPhone6,2"],
            "name": "iPhone 5s",
            "colors": ["#99989b", "#d7d9d8", "#d4c5b3"],
        },
        {
            "identifiers": ["iPhone7,2"],
            "name": "iPhone 6",
            "colors": ["#b4b5b9", "#d7d9d8", "#e1ccb5"],
        },
        {
            "identifiers": ["iPhone7,1"],
            "name": "iPhone 6 Plus",
            "colors": ["#b4b5b9", "#d7d9d8", "#e1ccb5"],
        },
        {
            "identifiers": ["iPhone8,1"],
            "name": "iPhone 6s (Model A1633, A1688, A1700)",
            "colors": ["#b9b7ba", "#dadcdb", "#e1ccb7", "#e4c1b9"],
            "default_color": "#dadcdb",
        },
        {
            "identifiers": ["iPhone8,2"],
            "name": "iPhone 6s Plus (Model A1634, A1687, A1699)",
            "colors": ["#b9b7ba", "#dadcdb", "#e1ccb7", "#e4c1b9"],
            "default_color": "#dadcdb",
        },
        {
            "identifiers": ["iPhone8,4"],
            "name": "iPhone SE (Model A1662, A1723, A1724)",
            "colors": ["#b9b7ba", "#dadcdb", "#e1ccb7", "#e4c1b9"],
        },
        # iPod touch
        {
            "identifiers": ["iPod1,1"],
            "name": "iPod touch (1st generation)",
            "generation": 1,
            "short_name": "iPod touch {generation}",
        },
        {
            "identifiers": ["iPod2,1"],
            "name": "iPod touch (2nd generation)",
            "generation": 2,
            "short_name": "iPod touch {generation}",
        },
        {
            "identifiers": ["iPod3,1"],
            "name": "iPod touch (3rd generation)",
            "generation": 3,
            "short_name": "iPod touch {generation}",
        },
        {
            "identifiers": ["iPod4,1"],
            "name": "iPod touch (4th generation)",
            "generation": 4,
            "short_name": "iPod touch {generation}",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPod5,1"],
            "name": "iPod touch (5th generation)",
            "generation": 5,
            "short_name": "iPod touch {generation}",
            "colors": ["slate", "silver", "pink", "yellow", "blue", "red"],
            "default_color": "silver",
        },
        {
            "identifiers": ["iPod7,1"],
            "name": "iPod touch (6th generation)",
            "generation": 6,
            "short_name": "iPod touch {generation}",
            "colors": [
                "#3b3b3c",
                "#f5f4f7",
                "#fe767a",
                "#faf189",
                "#46abe0",
                "#c6353f",
                "#e1ccb5",
            ],
        },
        # iPad
        {
            "identifiers": ["iPad1,1"],
            "name": "iPad",
        },
        {
            "identifiers": ["iPad2,1"],
            "name": "iPad 2 (Wi-Fi)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad2,2"],
            "name": "iPad 2 (GSM)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad2,3", "iPad2,4"],
            "name": "iPad 2 (CDMA)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad2,5"],
            "name": "iPad mini (Wi-Fi)",
            "colors": ["slate", "white"],
        },
        {
            "identifiers": ["iPad2,6", "iPad2,7"],
            "name": "iPad mini (Wi-Fi + Cellular)",
            "colors": ["slate", "white"],
        },
        {
            "identifiers": ["iPad3,1"],
            "name": "iPad 3 (Wi-Fi)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad3,2", "iPad3,3"],
            "name": "iPad 3 (Wi-Fi + Cellular)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad3,4"],
            "name": "iPad 4 (Wi-Fi)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad3,5", "iPad3,6"],
            "name": "iPad 4 (Wi-Fi + Cellular)",
            "colors": ["black", "white"],
        },
        {
            "identifiers": ["iPad4,1"],
            "name": "iPad Air (Wi-Fi)",
        },
        {
            "identifiers": ["iPad4,2", "iPad4,3"],
            "name": "iPad Air (Wi-Fi + Cellular)",
        },
        {
            "identifiers": ["iPad5,3"],
            "name": "iPad Air 2 (Wi-Fi)",
        },
        {
            "identifiers": ["iPad5,4"],
            "name": "iPad Air 2 (Wi-Fi + Cellular)",
        },
        {
            "identifiers": ["iPad6,7"],
            "name": "iPad Pro (12.9-inch) (Wi-Fi)",
        },
        {
            "identifiers": ["iPad6,8"],
            "name": "iPad Pro (12.9-inch) (Wi-Fi + Cellular)",
        },
        # Apple Watch
        {
            "identifiers": ["Watch1,1"],
            "name": "Apple Watch 38mm",
            "colors": ["1", "2", "3", "4", "5", "6", "7", "8", "9"],
        },
        {
            "identifiers": ["Watch1,2"],
            "name": "Apple Watch 42mm",
            "colors": ["1", "2", "3", "4", "5", "6", "7", "8", "9"],
        },
        # Apple TV
        {
            "identifiers": ["AppleTV2,1"],
            "name": "Apple TV (2nd generation)",
        },
        {
            "identifiers": ["AppleTV3,1", "AppleTV3,2"],
            "name": "Apple TV (3rd generation)",
        },
        {
            "identifiers": ["AppleTV5,3"],
            "name": "Apple TV (4th generation)",
        },
        # Simulator
        {
            "identifiers": ["i386", "x86_64", "arm64"],
            "name": "Simulator",
            "icons": {"default": "simulator.png"},
        },
    ]
}
