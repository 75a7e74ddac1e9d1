TRANSLATIONS = {
    # --- Client --------------------------------------------------------------
    "client": {
        "A non-recoverable error occured": {
            "en": "A non-recoverable error occured",
            "de": "Ein nicht behebbarer Fehler ist aufgetreten",
            "_hint": "generic error message of all html clients",
        },
        "Please select a valid billing address": {
            "de": "Bitte wählen Sie eine gültige Rechnungsadresse",
            "_hint": "checkout address step: unknown ca_billingoption",
        },
        "Please select a valid delivery address": {
            "de": "Bitte wählen Sie eine gültige Lieferadresse",
            "_hint": "checkout address step: unknown ca_deliveryoption",
        },
        "At least one mandatory field is missing": {
            "de": "Mindestens ein Pflichtfeld fehlt",
            "_hint": "checkout address step: incomplete address form",
        },
        "This field is mandatory": {
            "de": "Dies ist ein Pflichtfeld",
            "_hint": "checkout address step: error of a single form field",
        },
        "address": {
            "de": "Adresse",
            "_hint": "checkout step name",
        },
        "new address": {
            "de": "neue Adresse",
        },
        "like billing address": {
            "de": "wie Rechnungsadresse",
        },

        # --- Basket page -----------------------------------------------------
        "Back": {
            "de": "Zurück",
            "_hint": "basket: link to the last catalog page",
        },
        "Invalid basket position": {
            "de": "Ungültige Position im Warenkorb",
            "_hint": "basket: b_position is not a number",
        },
        "Check": {
            "de": "Prüfen",
        },
        "Checkout": {
            "de": "Zur Kasse",
        },
        "Delivery": {
            "de": "Versand",
        },
        "Payment": {
            "de": "Zahlung",
        },
    },

    # --- Frontend controllers ------------------------------------------------
    "controller/frontend": {
        "Product not found": {
            "de": "Artikel nicht gefunden",
        },
        "Invalid coupon code": {
            "de": "Ungültiger Gutscheincode",
        },
        "No product at position": {
            "de": "Kein Artikel an dieser Position",
        },
    },

    # --- Domain --------------------------------------------------------------
    "mshop": {
        "Checking the basket content failed": {
            "de": "Die Prüfung des Warenkorbs ist fehlgeschlagen",
        },
    },

    # --- Plugin error codes --------------------------------------------------
    "mshop/code": {
        "product": {
            "de": "Artikel",
            "_hint": "error code scope",
        },
        "stock.notenough": {
            "en": "There are not enough products \"{}\" in stock",
            "de": "Es sind nicht genug Artikel \"{}\" auf Lager",
        },
        "product.gone": {
            "en": "The product \"{}\" is not available any more",
            "de": "Der Artikel \"{}\" ist nicht mehr verfügbar",
        },
        "basket.empty": {
            "en": "Your basket is empty",
            "de": "Ihr Warenkorb ist leer",
        },
    },
}
