from typing import Dict

LANGUAGES = ("en", "ta", "ml")

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "News Radar",
        "searchTopic": "Search Topic",
        "search": "Search",
        "searching": "Searching...",
        "yourStats": "Your Stats",
        "dailyStreak": "Daily Streak",
        "readerRank": "Reader Rank",
        "rankedArticles": "Ranked Articles",
        "noArticles": "No articles to display. Try a new search.",
        "topicGraph": "Topic Graph",
        "graphPlaceholder": "The topic relationship graph will appear here.",
        "fetchingNews": "Fetching and analyzing the latest news...",
        "readFullArticle": "Read full article",
        "home": "Home",
        "about": "About",
        "profile": "Profile",
        "welcome": "Welcome",
        "aboutTitle": "About News Radar",
        "aboutText": "News Radar finds recent articles on any topic, ranks them by relevance and maps how the people, organizations and ideas in them connect.",
        "profileTitle": "Your Profile",
        "profileText": "Log in to comment on articles and keep your reading stats.",
        "yourName": "Your Name",
        "saveName": "Save Name",
        "nameSaved": "Name saved!",
        "comments": "Comments",
        "addComment": "Add a comment...",
        "loginToComment": "Log in to leave a comment.",
        "copied": "Copied!",
        "weakWarrior": "Weak Warrior",
        "gettingStarted": "Getting Started",
        "informedCitizen": "Informed Citizen",
        "newsHound": "News Hound",
        "topReader": "Top Reader",
        "login": "Log In",
        "signup": "Sign Up",
        "logout": "Log Out",
        "email": "Email",
        "password": "Password",
        "authPrompt": "Log in or create an account to continue.",
        "loginSuccess": "Logged in successfully.",
        "signupSuccess": "Account created successfully.",
        "logoutSuccess": "Logged out.",
        "invalidCredentials": "Invalid email or password.",
        "userExists": "An account with this email already exists.",
        "yourProfile": "Your Profile",
        "loggedInAs": "Logged in as",
    },
    "ta": {
        "title": "செய்தி ரேடார்",
        "searchTopic": "தலைப்பைத் தேடு",
        "search": "தேடு",
        "searching": "தேடுகிறது...",
        "yourStats": "உங்கள் புள்ளிவிவரங்கள்",
        "dailyStreak": "தினசரி தொடர்",
        "readerRank": "வாசகர் தரம்",
        "rankedArticles": "தரவரிசை கட்டுரைகள்",
        "noArticles": "காட்ட கட்டுரைகள் இல்லை. புதிய தேடலை முயற்சிக்கவும்.",
        "topicGraph": "தலைப்பு வரைபடம்",
        "graphPlaceholder": "தலைப்பு தொடர்பு வரைபடம் இங்கே தோன்றும்.",
        "fetchingNews": "சமீபத்திய செய்திகளைப் பெற்று பகுப்பாய்வு செய்கிறது...",
        "readFullArticle": "முழு கட்டுரையைப் படிக்கவும்",
        "home": "முகப்பு",
        "about": "பற்றி",
        "profile": "சுயவிவரம்",
        "welcome": "வரவேற்கிறோம்",
        "aboutTitle": "செய்தி ரேடார் பற்றி",
        "profileTitle": "உங்கள் சுயவிவரம்",
        "yourName": "உங்கள் பெயர்",
        "saveName": "பெயரைச் சேமி",
        "nameSaved": "பெயர் சேமிக்கப்பட்டது!",
        "comments": "கருத்துகள்",
        "addComment": "கருத்தைச் சேர்க்கவும்...",
        "loginToComment": "கருத்து தெரிவிக்க உள்நுழையவும்.",
        "copied": "நகலெடுக்கப்பட்டது!",
        "weakWarrior": "பலவீன வீரர்",
        "gettingStarted": "தொடக்கநிலை",
        "informedCitizen": "விழிப்புள்ள குடிமகன்",
        "newsHound": "செய்தி வேட்டைக்காரர்",
        "topReader": "சிறந்த வாசகர்",
        "login": "உள்நுழை",
        "signup": "பதிவு செய்",
        "logout": "வெளியேறு",
        "email": "மின்னஞ்சல்",
        "password": "கடவுச்சொல்",
        "loginSuccess": "வெற்றிகரமாக உள்நுழைந்தீர்கள்.",
        "signupSuccess": "கணக்கு வெற்றிகரமாக உருவாக்கப்பட்டது.",
        "logoutSuccess": "வெளியேறினீர்கள்.",
        "invalidCredentials": "தவறான மின்னஞ்சல் அல்லது கடவுச்சொல்.",
        "userExists": "இந்த மின்னஞ்சலுடன் ஏற்கனவே ஒரு கணக்கு உள்ளது.",
        "yourProfile": "உங்கள் சுயவிவரம்",
        "loggedInAs": "உள்நுழைந்தவர்",
    },
    "ml": {
        "title": "ന്യൂസ് റഡാർ",
        "searchTopic": "വിഷയം തിരയുക",
        "search": "തിരയുക",
        "searching": "തിരയുന്നു...",
        "yourStats": "നിങ്ങളുടെ സ്ഥിതിവിവരങ്ങൾ",
        "dailyStreak": "ദൈനംദിന തുടർച്ച",
        "readerRank": "വായനക്കാരന്റെ റാങ്ക്",
        "rankedArticles": "റാങ്ക് ചെയ്ത ലേഖനങ്ങൾ",
        "noArticles": "കാണിക്കാൻ ലേഖനങ്ങളില്ല. പുതിയ തിരയൽ ശ്രമിക്കുക.",
        "topicGraph": "വിഷയ ഗ്രാഫ്",
        "graphPlaceholder": "വിഷയ ബന്ധ ഗ്രാഫ് ഇവിടെ ദൃശ്യമാകും.",
        "fetchingNews": "ഏറ്റവും പുതിയ വാർത്തകൾ ശേഖരിച്ച് വിശകലനം ചെയ്യുന്നു...",
        "readFullArticle": "മുഴുവൻ ലേഖനം വായിക്കുക",
        "home": "ഹോം",
        "about": "കുറിച്ച്",
        "profile": "പ്രൊഫൈൽ",
        "welcome": "സ്വാഗതം",
        "aboutTitle": "ന്യൂസ് റഡാറിനെക്കുറിച്ച്",
        "profileTitle": "നിങ്ങളുടെ പ്രൊഫൈൽ",
        "yourName": "നിങ്ങളുടെ പേര്",
        "saveName": "പേര് സംരക്ഷിക്കുക",
        "nameSaved": "പേര് സംരക്ഷിച്ചു!",
        "comments": "അഭിപ്രായങ്ങൾ",
        "addComment": "ഒരു അഭിപ്രായം ചേർക്കുക...",
        "loginToComment": "അഭിപ്രായമിടാൻ ലോഗിൻ ചെയ്യുക.",
        "copied": "പകർത്തി!",
        "weakWarrior": "ദുർബല യോദ്ധാവ്",
        "gettingStarted": "തുടക്കക്കാരൻ",
        "informedCitizen": "അറിവുള്ള പൗരൻ",
        "newsHound": "വാർത്താ വേട്ടക്കാരൻ",
        "topReader": "മികച്ച വായനക്കാരൻ",
        "login": "ലോഗിൻ",
        "signup": "സൈൻ അപ്പ്",
        "logout": "ലോഗൗട്ട്",
        "email": "ഇമെയിൽ",
        "password": "പാസ്‌വേഡ്",
        "loginSuccess": "വിജയകരമായി ലോഗിൻ ചെയ്തു.",
        "signupSuccess": "അക്കൗണ്ട് വിജയകരമായി സൃഷ്ടിച്ചു.",
        "logoutSuccess": "ലോഗൗട്ട് ചെയ്തു.",
        "invalidCredentials": "തെറ്റായ ഇമെയിൽ അല്ലെങ്കിൽ പാസ്‌വേഡ്.",
        "userExists": "ഈ ഇമെയിലിൽ ഇതിനകം ഒരു അക്കൗണ്ട് ഉണ്ട്.",
        "yourProfile": "നിങ്ങളുടെ പ്രൊഫൈൽ",
        "loggedInAs": "ലോഗിൻ ചെയ്തത്",
    },
}


def get_translations(lang: str) -> Dict[str, str]:
    """UI strings for `lang`; English fills unknown languages and missing keys."""
    base = TRANSLATIONS["en"]
    return {**base, **TRANSLATIONS.get(lang, {})}
