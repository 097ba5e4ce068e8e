"""Fixed catalogs loaded by the seeding utilities.

Each catalog maps a brewery (with its details) to the beers it brews. Demo pubs
refer to beers by (brewery name, beer name).
"""

BEER_PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1608270586620-248524c67de9?w=200&h=200&fit=crop"

ITALIAN_CATALOG = [
    {
        "brewery": {
            "name": "Baladin",
            "location": "Piozzo",
            "region": "Piemonte",
            "country": "Italia",
            "website_url": "https://www.baladin.it",
            "description": "Pioniere della birra artigianale italiana, fondato da Teo Musso nel 1996.",
        },
        "beers": [
            {"name": "Nazionale", "style": "Belgian Blonde Ale", "abv": 6.5, "ibu": 25, "color": "Biondo dorato",
             "description": "La prima birra 100% italiana fatta con ingredienti locali."},
            {"name": "L'Ippa", "style": "Italian IPA", "abv": 5.9, "ibu": 40, "color": "Ambrato chiaro",
             "description": "IPA all'italiana, luppolata ma equilibrata."},
            {"name": "Nora", "style": "Spiced Beer", "abv": 6.8, "ibu": 18, "color": "Ambrato",
             "description": "Birra speziata ispirata all'antico Egitto, con kamut, zenzero e mirra."},
            {"name": "Rock'n'Roll", "style": "Pale Ale", "abv": 7.5, "ibu": 30, "color": "Ambrato",
             "description": "Pale ale con pepe di Sichuan."},
            {"name": "Leon", "style": "Belgian Dark Strong Ale", "abv": 8.5, "ibu": 20, "color": "Bruno",
             "description": "Birra scura e morbida con note di caramello e frutta secca."},
            {"name": "Isaac", "style": "Witbier", "abv": 5.0, "ibu": 12, "color": "Biondo velato",
             "description": "Bianca con coriandolo e scorza d'arancia."},
            {"name": "Wayan", "style": "Saison", "abv": 5.8, "ibu": 20, "color": "Dorato",
             "description": "Saison speziata con pepe e cereali diversi."},
            {"name": "Xyauyù", "style": "Barley Wine", "abv": 14.0, "ibu": 25, "color": "Ambrato scuro",
             "description": "Birra da meditazione ossidata volutamente, senza carbonazione."},
            {"name": "Pop Popular Beer", "style": "Lager", "abv": 4.7, "ibu": 22, "color": "Giallo dorato",
             "description": "Birra accessibile in stile lager, facile da bere."},
        ],
    },
    {
        "brewery": {
            "name": "Birra del Borgo",
            "location": "Borgorose",
            "region": "Lazio",
            "country": "Italia",
            "website_url": "https://www.birradelborgo.it",
            "description": "Birrificio nato nel 2005 tra le montagne del Cicolano.",
        },
        "beers": [
            {"name": "ReAle", "style": "English IPA", "abv": 6.4, "ibu": 45, "color": "Ambrato",
             "description": "La birra simbolo del Borgo, luppolata e beverina."},
            {"name": "ReAle Extra", "style": "Double IPA", "abv": 8.0, "ibu": 60, "color": "Ambrato carico",
             "description": "La sorella maggiore della ReAle."},
            {"name": "Duchessa", "style": "Saison", "abv": 5.8, "ibu": 20, "color": "Dorato",
             "description": "Saison con farro."},
            {"name": "My Antonia", "style": "Imperial Pilsner", "abv": 7.6, "ibu": 55, "color": "Dorato",
             "description": "Pils imperiale luppolata in continuo."},
            {"name": "CastagnAle", "style": "Chestnut Ale", "abv": 6.0, "ibu": 20, "color": "Ambrato",
             "description": "Ale con castagne tostate."},
            {"name": "Enkir", "style": "Ancient Wheat Ale", "abv": 5.5, "ibu": 18, "color": "Biondo",
             "description": "Birra con farro monococco."},
        ],
    },
    {
        "brewery": {
            "name": "Birrificio Italiano",
            "location": "Lurago Marinone",
            "region": "Lombardia",
            "country": "Italia",
            "website_url": "https://www.birrificio.it",
            "description": "Uno dei primi brewpub italiani, aperto nel 1994.",
        },
        "beers": [
            {"name": "Tipopils", "style": "Italian Pilsner", "abv": 5.2, "ibu": 35, "color": "Giallo paglierino",
             "description": "La pils che ha definito lo stile Italian Pilsner."},
            {"name": "Bibock", "style": "Heller Bock", "abv": 6.2, "ibu": 30, "color": "Ambrato chiaro",
             "description": "Bock chiara luppolata."},
            {"name": "Scires", "style": "Fruit Beer", "abv": 7.5, "ibu": 15, "color": "Rosso rubino",
             "description": "Birra alle ciliegie di Vignola."},
        ],
    },
    {
        "brewery": {
            "name": "Birrificio Lambrate",
            "location": "Milano",
            "region": "Lombardia",
            "country": "Italia",
            "website_url": "https://www.birrificiolambrate.com",
            "description": "Storico birrificio milanese nato nel 1996.",
        },
        "beers": [
            {"name": "Montestella", "style": "Pilsner", "abv": 5.0, "ibu": 30, "color": "Biondo",
             "description": "Pils non filtrata, dedicata alla collina milanese."},
            {"name": "Ghisa", "style": "Smoked Stout", "abv": 5.0, "ibu": 35, "color": "Nero",
             "description": "Stout affumicata dedicata ai vigili milanesi."},
            {"name": "Ligera", "style": "American Pale Ale", "abv": 4.8, "ibu": 40, "color": "Dorato",
             "description": "APA leggera e agrumata."},
        ],
    },
    {
        "brewery": {
            "name": "Toccalmatto",
            "location": "Fidenza",
            "region": "Emilia-Romagna",
            "country": "Italia",
            "website_url": "https://www.birratoccalmatto.it",
            "description": "Birrificio emiliano noto per le birre luppolate e le sperimentazioni.",
        },
        "beers": [
            {"name": "Zona Cesarini", "style": "Pacific IPA", "abv": 6.8, "ibu": 60, "color": "Dorato",
             "description": "IPA con luppoli dell'emisfero australe."},
            {"name": "Surfing Hop", "style": "American Pale Ale", "abv": 5.2, "ibu": 45, "color": "Dorato",
             "description": "Pale ale fresca e tropicale."},
        ],
    },
]

GLOBAL_CATALOG = [
    {
        "brewery": {"name": "Dogfish Head", "location": "Milton, Delaware", "region": "Delaware", "country": "USA",
                    "website_url": "https://www.dogfish.com"},
        "beers": [
            {"name": "60 Minute IPA", "style": "American IPA", "abv": 6.0, "ibu": 60, "color": "Golden amber",
             "description": "Continuously hopped IPA with citrus and floral notes"},
            {"name": "90 Minute IPA", "style": "Imperial IPA", "abv": 9.0, "ibu": 90, "color": "Deep amber",
             "description": "Imperial IPA with intense hop character and caramel malt backbone"},
        ],
    },
    {
        "brewery": {"name": "Stone Brewing", "location": "Escondido, California", "region": "California",
                    "country": "USA", "website_url": "https://www.stonebrewing.com"},
        "beers": [
            {"name": "Stone IPA", "style": "American IPA", "abv": 6.9, "ibu": 77, "color": "Golden amber",
             "description": "Bold, citrusy American IPA with tropical fruit notes"},
            {"name": "Arrogant Bastard Ale", "style": "American Strong Ale", "abv": 7.2, "ibu": 100,
             "color": "Deep amber", "description": "Aggressive ale with intense hop bitterness and malt character"},
        ],
    },
    {
        "brewery": {"name": "BrewDog", "location": "Ellon", "region": "Scotland", "country": "UK",
                    "website_url": "https://www.brewdog.com"},
        "beers": [
            {"name": "Punk IPA", "style": "India Pale Ale", "abv": 5.6, "ibu": 45, "color": "Golden",
             "description": "Post-modern classic with tropical fruit flavours and sharp bitter finish"},
            {"name": "Elvis Juice", "style": "Grapefruit IPA", "abv": 6.5, "ibu": 40, "color": "Golden amber",
             "description": "IPA infused with grapefruit for citrus explosion"},
        ],
    },
    {
        "brewery": {"name": "Cantillon", "location": "Brussels", "region": "Brussels", "country": "Belgium",
                    "website_url": "https://www.cantillon.be"},
        "beers": [
            {"name": "Gueuze 100% Lambic", "style": "Gueuze", "abv": 5.0, "ibu": 10, "color": "Golden",
             "description": "Blend of one, two and three year old lambics"},
            {"name": "Kriek 100% Lambic", "style": "Fruit Lambic", "abv": 5.0, "ibu": 8, "color": "Ruby red",
             "description": "Lambic macerated with sour cherries"},
        ],
    },
    {
        "brewery": {"name": "Weihenstephan", "location": "Freising", "region": "Bavaria", "country": "Germany",
                    "website_url": "https://www.weihenstephaner.de"},
        "beers": [
            {"name": "Hefeweissbier", "style": "Hefeweizen", "abv": 5.4, "ibu": 14, "color": "Golden hazy",
             "description": "Classic Bavarian wheat beer with banana and clove"},
            {"name": "Pilsner", "style": "German Pilsner", "abv": 5.1, "ibu": 28, "color": "Pale gold",
             "description": "Crisp pilsner with noble hop aroma"},
        ],
    },
    {
        "brewery": {"name": "Duvel Moortgat", "location": "Breendonk", "region": "Antwerp", "country": "Belgium",
                    "website_url": "https://www.duvel.com"},
        "beers": [
            {"name": "Duvel", "style": "Belgian Golden Strong Ale", "abv": 8.5, "ibu": 32, "color": "Golden",
             "description": "Refined golden ale with fruity esters and dry finish"},
        ],
    },
    {
        "brewery": {"name": "Chimay", "location": "Baileux", "region": "Hainaut", "country": "Belgium",
                    "website_url": "https://chimay.com"},
        "beers": [
            {"name": "Chimay Blue", "style": "Belgian Quadrupel", "abv": 9.0, "ibu": 25, "color": "Dark brown",
             "description": "Trappist ale with dark fruit and spice"},
            {"name": "Chimay Red", "style": "Belgian Dubbel", "abv": 7.0, "ibu": 20, "color": "Copper",
             "description": "Fruity trappist dubbel"},
        ],
    },
    {
        "brewery": {"name": "Russian River", "location": "Santa Rosa, California", "region": "California",
                    "country": "USA", "website_url": "https://russianriverbrewing.com"},
        "beers": [
            {"name": "Pliny the Elder", "style": "Double IPA", "abv": 8.0, "ibu": 100, "color": "Golden",
             "description": "Benchmark double IPA with pine and citrus"},
        ],
    },
]

# Legacy scalar prices (0.2L / 0.4L / 1L) are normalized on insert like API input.
DEMO_PUBS = [
    {
        "pub": {
            "name": "The Hop Garden",
            "address": "Via Roma 15",
            "city": "Milano",
            "region": "Lombardia",
            "postal_code": "20121",
            "description": "Birreria artigianale nel cuore di Milano con oltre 20 spine e 100 birre in bottiglia.",
            "phone": "+39 02 1234567",
            "email": "info@thehopgarden.it",
            "website_url": "https://thehopgarden.it",
            "latitude": 45.4642,
            "longitude": 9.1900,
            "facebook_url": "https://facebook.com/thehopgarden",
            "instagram_url": "https://instagram.com/thehopgarden_milano",
            "opening_hours": {
                "monday": {"isClosed": True},
                "tuesday": {"open": "18:00", "close": "01:00"},
                "wednesday": {"open": "18:00", "close": "01:00"},
                "thursday": {"open": "18:00", "close": "01:00"},
                "friday": {"open": "18:00", "close": "02:00"},
                "saturday": {"open": "17:00", "close": "02:00"},
                "sunday": {"open": "17:00", "close": "24:00"},
            },
        },
        "taps": [
            {"beer": ("Baladin", "Nazionale"), "tap_number": 1, "price_small": 4.5, "price_medium": 7.0,
             "price_large": 8.5, "description": "Fresca e beverina, perfetta per l'aperitivo"},
            {"beer": ("Baladin", "L'Ippa"), "tap_number": 2, "price_small": 5.0, "price_medium": 7.5,
             "price_large": 9.0, "description": "IPA luppolata con note agrumate"},
            {"beer": ("Birrificio Lambrate", "Ghisa"), "tap_number": 3, "price_small": 5.2, "price_medium": 8.0,
             "price_large": 9.5, "description": "Stout affumicata con note di caffè"},
        ],
        "bottles": [
            {"beer": ("Baladin", "Xyauyù"), "price": 15.8, "bottle_size": "0.5L", "quantity": 12,
             "description": "Barley wine da meditazione"},
            {"beer": ("Baladin", "Isaac"), "price": 9.9, "bottle_size": "0.33L", "quantity": 36,
             "description": "Bianca con coriandolo e scorza d'arancia"},
        ],
        "menu": [
            {"name": "Antipasti", "description": "Selezione di antipasti lombardi", "items": [
                {"name": "Tagliere Milanese", "description": "Salumi lombardi, gorgonzola DOP, mostarda di Cremona",
                 "price": 16.5, "allergens": ["Latticini", "Solfiti"]},
                {"name": "Vitello Tonnato", "description": "Fettine di vitello con salsa tonnata e capperi",
                 "price": 14.0, "allergens": ["Uova", "Pesce"]},
            ]},
            {"name": "Secondi", "description": "Carni e pesci accompagnati dalle nostre birre", "items": [
                {"name": "Cotoletta alla Milanese", "description": "Costoletta di vitello impanata e fritta",
                 "price": 24.0, "allergens": ["Glutine", "Uova"]},
            ]},
        ],
    },
    {
        "pub": {
            "name": "Birrificio del Borgo Roma",
            "address": "Piazza Navona 42",
            "city": "Roma",
            "region": "Lazio",
            "postal_code": "00186",
            "description": "Storico locale romano specializzato in birre artigianali italiane e internazionali.",
            "phone": "+39 06 9876543",
            "email": "info@birrificiodelborgo.roma",
            "latitude": 41.9028,
            "longitude": 12.4964,
            "instagram_url": "https://instagram.com/birrificiodelborgo_roma",
            "twitter_url": "https://twitter.com/birrificioborgo",
        },
        "taps": [
            {"beer": ("Birra del Borgo", "ReAle"), "tap_number": 1, "price_small": 4.2, "price_medium": 6.8,
             "price_large": 8.2, "description": "La classica del Borgo"},
            {"beer": ("Birra del Borgo", "Duchessa"), "tap_number": 2, "price_small": 4.6, "price_medium": 7.0,
             "price_large": 8.6, "description": "Saison al farro dal carattere rustico"},
        ],
        "bottles": [
            {"beer": ("Birra del Borgo", "My Antonia"), "price": 11.2, "bottle_size": "0.33L", "quantity": 18},
        ],
        "menu": [
            {"name": "Antipasti Romani", "description": "Specialità della tradizione capitolina", "items": [
                {"name": "Supplì al Telefono", "description": "Classici supplì romani con mozzarella filante",
                 "price": 8.5, "allergens": ["Glutine", "Latticini", "Uova"]},
            ]},
            {"name": "Primi", "description": "Pasta fresca fatta in casa", "items": [
                {"name": "Cacio e Pepe", "description": "Tonnarelli con pecorino romano e pepe nero",
                 "price": 14.0, "allergens": ["Glutine", "Latticini"]},
                {"name": "Carbonara", "description": "Spaghetti con guanciale, uova e pecorino",
                 "price": 15.5, "allergens": ["Glutine", "Uova", "Latticini"]},
            ]},
        ],
    },
    {
        "pub": {
            "name": "Malto & Luppolo",
            "address": "Corso Francia 128",
            "city": "Torino",
            "region": "Piemonte",
            "postal_code": "10143",
            "description": "Birreria torinese con focus su birre piemontesi e cucina del territorio.",
            "phone": "+39 011 5551234",
            "email": "info@maltoluppolo.to",
            "latitude": 45.0703,
            "longitude": 7.6869,
        },
        "taps": [
            {"beer": ("Baladin", "Pop Popular Beer"), "tap_number": 1, "price_small": 4.3, "price_medium": 6.9,
             "price_large": 8.3},
            {"beer": ("Birrificio Italiano", "Tipopils"), "tap_number": 2, "price_small": 5.1,
             "price_medium": 7.8, "price_large": 9.3},
        ],
        "bottles": [],
        "menu": [
            {"name": "Aperitivo", "description": "Stuzzichini per l'happy hour torinese", "items": [
                {"name": "Bagna Cauda", "description": "Verdure crude con salsa tipica piemontese",
                 "price": 13.5, "allergens": ["Pesce"]},
            ]},
        ],
    },
    {
        "pub": {
            "name": "La Cantina delle Birre",
            "address": "Via del Campo 23",
            "city": "Firenze",
            "region": "Toscana",
            "postal_code": "50123",
            "description": "Enoteca e birreria fiorentina con oltre 200 etichette.",
            "phone": "+39 055 2341567",
            "email": "info@cantinabirre.fi",
            "website_url": "https://cantinabirre.firenze.it",
            "latitude": 43.7696,
            "longitude": 11.2558,
        },
        "taps": [
            {"beer": ("Toccalmatto", "Zona Cesarini"), "tap_number": 1, "price_small": 5.4, "price_medium": 8.1,
             "price_large": 9.8},
            {"beer": ("Birrificio Italiano", "Tipopils"), "tap_number": 2, "price_small": 4.4,
             "price_medium": 7.0, "price_large": 8.4, "description": "Pilsner classica sempre disponibile"},
        ],
        "bottles": [
            {"beer": ("Birrificio Italiano", "Scires"), "price": 16.5, "bottle_size": "0.375L", "quantity": 6},
        ],
        "menu": [
            {"name": "Taglieri", "description": "Salumi e formaggi toscani selezionati", "items": [
                {"name": "Tagliere del Chianti", "description": "Pecorino toscano, salami, miele di acacia",
                 "price": 18.5, "allergens": ["Latticini"]},
            ]},
            {"name": "Carne", "description": "Bistecche alla fiorentina e arrosti", "items": [
                {"name": "Bistecca alla Fiorentina", "description": "T-bone di Chianina da 800g",
                 "price": 45.0, "allergens": []},
            ]},
        ],
    },
]
