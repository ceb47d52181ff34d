CURRENT_LANG = "en"

TRANSLATIONS = {
    "en": {
        "app_title": "AfriLex Deep - Cognate Map",
        "menu_file": "File",
        "menu_exit": "Exit",
        "menu_edit": "Edit",
        "menu_prefs": "Preferences...",
        "menu_view": "View",
        "menu_reset": "Reset View",
        "pref_title": "Preferences",
        "pref_lang": "Language:",
        "pref_theme": "Theme:",
        "theme_light": "Papyrus (light)",
        "theme_dark": "Night (dark)",
        "btn_save": "Save",
        "btn_cancel": "Cancel",
        "btn_search": "Research",
        "search_placeholder": "Enter a root word (e.g. 'Water', 'Sun', 'Mother')",
        "lbl_api_key": "API Key:",
        "lbl_model": "Model:",
        "tab_graph": "Cognate Map",
        "tab_list": "Lexical Database",
        "tab_analysis": "Analysis",
        "tab_details": "Details",
        "filter_placeholder": "Filter languages...",
        "info_idle": "Enter a word to trace its African cognates.",
        "info_searching": "Researching \"{}\"... Please wait.",
        "info_loaded": "\"{}\": {} translations, {} languages",
        "info_failed": "Unable to retrieve linguistic records.",
        "msg_error": "Research Error",
        "msg_missing_key": "Please enter a valid Google Gemini API Key.",
        "msg_missing_model": "Please enter a valid Model Name.",
        "lbl_zoom": "Zoom: {}%",
        "btn_zoom_in": "Zoom In",
        "btn_zoom_out": "Zoom Out",
        "btn_reset": "Reset View",
        "lbl_details_hint": "Select a node to view details.",
        "lbl_family": "Family",
        "lbl_region": "Region",
        "lbl_pronunciation": "Pronunciation",
        "lbl_group": "Phonetic group",
        "lbl_notes": "Notes",
        "lbl_classical": "CLASSICAL",
        "lbl_showing": "Showing {} of {} languages",
    },
    "fr": {
        "app_title": "AfriLex Deep - Carte des cognats",
        "menu_file": "Fichier",
        "menu_exit": "Quitter",
        "menu_edit": "Édition",
        "menu_prefs": "Préférences...",
        "menu_view": "Affichage",
        "menu_reset": "Réinitialiser la vue",
        "pref_title": "Préférences",
        "pref_lang": "Langue :",
        "pref_theme": "Thème :",
        "theme_light": "Papyrus (clair)",
        "theme_dark": "Nuit (sombre)",
        "btn_save": "Enregistrer",
        "btn_cancel": "Annuler",
        "btn_search": "Rechercher",
        "search_placeholder": "Entrez un mot racine (ex. 'Eau', 'Soleil', 'Mère')",
        "lbl_api_key": "Clé API :",
        "lbl_model": "Modèle :",
        "tab_graph": "Carte des cognats",
        "tab_list": "Base lexicale",
        "tab_analysis": "Analyse",
        "tab_details": "Détails",
        "filter_placeholder": "Filtrer les langues...",
        "info_idle": "Entrez un mot pour retrouver ses cognats africains.",
        "info_searching": "Recherche de « {} »... Veuillez patienter.",
        "info_loaded": "« {} » : {} traductions, {} langues",
        "info_failed": "Impossible de récupérer les données linguistiques.",
        "msg_error": "Erreur de recherche",
        "msg_missing_key": "Veuillez saisir une clé API Google Gemini valide.",
        "msg_missing_model": "Veuillez saisir un nom de modèle valide.",
        "lbl_zoom": "Zoom : {} %",
        "btn_zoom_in": "Zoom avant",
        "btn_zoom_out": "Zoom arrière",
        "btn_reset": "Réinitialiser",
        "lbl_details_hint": "Sélectionnez un nœud pour voir les détails.",
        "lbl_family": "Famille",
        "lbl_region": "Région",
        "lbl_pronunciation": "Prononciation",
        "lbl_group": "Groupe phonétique",
        "lbl_notes": "Notes",
        "lbl_classical": "CLASSIQUE",
        "lbl_showing": "{} langues affichées sur {}",
    },
}


def tr(key):
    table = TRANSLATIONS.get(CURRENT_LANG, TRANSLATIONS["en"])
    return table.get(key, TRANSLATIONS["en"].get(key, key))
