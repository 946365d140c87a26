"""moji/characters.py

The character table: every emoji moji knows about, keyed by its canonical name.

Entries are authored once, never computed at runtime. Flags in the table match what moji.flags produces for
their ISO 3166 codes; subdivision flags are the gbeng, gbsct and gbwls tag sequences.

Copyright (C) 2016  Timothy Edmund Crosley

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
documentation files (the "Software"), to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software, and
to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or
substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED
TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
OTHER DEALINGS IN THE SOFTWARE.

"""
from __future__ import absolute_import

from types import MappingProxyType

CHARACTERS = MappingProxyType({
    # Smileys & Emotion
    'CHARACTER_GRINNING_FACE': '\U0001F600',
    'CHARACTER_GRINNING_FACE_WITH_BIG_EYES': '\U0001F603',
    'CHARACTER_GRINNING_FACE_WITH_SMILING_EYES': '\U0001F604',
    'CHARACTER_BEAMING_FACE_WITH_SMILING_EYES': '\U0001F601',
    'CHARACTER_GRINNING_SQUINTING_FACE': '\U0001F606',
    'CHARACTER_GRINNING_FACE_WITH_SWEAT': '\U0001F605',
    'CHARACTER_ROLLING_ON_THE_FLOOR_LAUGHING': '\U0001F923',
    'CHARACTER_FACE_WITH_TEARS_OF_JOY': '\U0001F602',
    'CHARACTER_SLIGHTLY_SMILING_FACE': '\U0001F642',
    'CHARACTER_UPSIDE_DOWN_FACE': '\U0001F643',
    'CHARACTER_WINKING_FACE': '\U0001F609',
    'CHARACTER_SMILING_FACE_WITH_SMILING_EYES': '\U0001F60A',
    'CHARACTER_SMILING_FACE_WITH_HALO': '\U0001F607',
    'CHARACTER_SMILING_FACE_WITH_HEARTS': '\U0001F970',
    'CHARACTER_SMILING_FACE_WITH_HEART_EYES': '\U0001F60D',
    'CHARACTER_STAR_STRUCK': '\U0001F929',
    'CHARACTER_FACE_BLOWING_A_KISS': '\U0001F618',
    'CHARACTER_KISSING_FACE': '\U0001F617',
    'CHARACTER_SMILING_FACE': '\u263A\uFE0F',
    'CHARACTER_THINKING_FACE': '\U0001F914',
    'CHARACTER_ZIPPER_MOUTH_FACE': '\U0001F910',
    'CHARACTER_NEUTRAL_FACE': '\U0001F610',
    'CHARACTER_EXPRESSIONLESS_FACE': '\U0001F611',
    'CHARACTER_FACE_WITHOUT_MOUTH': '\U0001F636',
    'CHARACTER_SMIRKING_FACE': '\U0001F60F',
    'CHARACTER_UNAMUSED_FACE': '\U0001F612',
    'CHARACTER_FACE_WITH_ROLLING_EYES': '\U0001F644',
    'CHARACTER_GRIMACING_FACE': '\U0001F62C',
    'CHARACTER_LYING_FACE': '\U0001F925',
    'CHARACTER_RELIEVED_FACE': '\U0001F60C',
    'CHARACTER_PENSIVE_FACE': '\U0001F614',
    'CHARACTER_SLEEPY_FACE': '\U0001F62A',
    'CHARACTER_SLEEPING_FACE': '\U0001F634',
    'CHARACTER_FACE_WITH_MEDICAL_MASK': '\U0001F637',
    'CHARACTER_NAUSEATED_FACE': '\U0001F922',
    'CHARACTER_SNEEZING_FACE': '\U0001F927',
    'CHARACTER_HOT_FACE': '\U0001F975',
    'CHARACTER_COLD_FACE': '\U0001F976',
    'CHARACTER_EXPLODING_HEAD': '\U0001F92F',
    'CHARACTER_COWBOY_HAT_FACE': '\U0001F920',
    'CHARACTER_PARTYING_FACE': '\U0001F973',
    'CHARACTER_SMILING_FACE_WITH_SUNGLASSES': '\U0001F60E',
    'CHARACTER_NERD_FACE': '\U0001F913',
    'CHARACTER_CONFUSED_FACE': '\U0001F615',
    'CHARACTER_WORRIED_FACE': '\U0001F61F',
    'CHARACTER_FROWNING_FACE': '\u2639\uFE0F',
    'CHARACTER_FACE_WITH_OPEN_MOUTH': '\U0001F62E',
    'CHARACTER_ASTONISHED_FACE': '\U0001F632',
    'CHARACTER_FLUSHED_FACE': '\U0001F633',
    'CHARACTER_PLEADING_FACE': '\U0001F97A',
    'CHARACTER_FEARFUL_FACE': '\U0001F628',
    'CHARACTER_CRYING_FACE': '\U0001F622',
    'CHARACTER_LOUDLY_CRYING_FACE': '\U0001F62D',
    'CHARACTER_FACE_SCREAMING_IN_FEAR': '\U0001F631',
    'CHARACTER_ANGRY_FACE': '\U0001F620',
    'CHARACTER_POUTING_FACE': '\U0001F621',
    'CHARACTER_SMILING_FACE_WITH_HORNS': '\U0001F608',
    'CHARACTER_SKULL': '\U0001F480',
    'CHARACTER_PILE_OF_POO': '\U0001F4A9',
    'CHARACTER_CLOWN_FACE': '\U0001F921',
    'CHARACTER_GHOST': '\U0001F47B',
    'CHARACTER_ALIEN': '\U0001F47D',
    'CHARACTER_ROBOT': '\U0001F916',
    'CHARACTER_SEE_NO_EVIL_MONKEY': '\U0001F648',
    'CHARACTER_HEAR_NO_EVIL_MONKEY': '\U0001F649',
    'CHARACTER_SPEAK_NO_EVIL_MONKEY': '\U0001F64A',
    'CHARACTER_RED_HEART': '\u2764\uFE0F',
    'CHARACTER_ORANGE_HEART': '\U0001F9E1',
    'CHARACTER_YELLOW_HEART': '\U0001F49B',
    'CHARACTER_GREEN_HEART': '\U0001F49A',
    'CHARACTER_BLUE_HEART': '\U0001F499',
    'CHARACTER_PURPLE_HEART': '\U0001F49C',
    'CHARACTER_BLACK_HEART': '\U0001F5A4',
    'CHARACTER_BROKEN_HEART': '\U0001F494',
    'CHARACTER_HEART_ON_FIRE': '\u2764\uFE0F\u200D\U0001F525',
    'CHARACTER_SPARKLING_HEART': '\U0001F496',
    'CHARACTER_HUNDRED_POINTS': '\U0001F4AF',
    'CHARACTER_COLLISION': '\U0001F4A5',
    'CHARACTER_ZZZ': '\U0001F4A4',

    # People & Body
    'CHARACTER_WAVING_HAND': '\U0001F44B',
    'CHARACTER_WAVING_HAND_LIGHT_SKIN_TONE': '\U0001F44B\U0001F3FB',
    'CHARACTER_WAVING_HAND_MEDIUM_SKIN_TONE': '\U0001F44B\U0001F3FD',
    'CHARACTER_WAVING_HAND_DARK_SKIN_TONE': '\U0001F44B\U0001F3FF',
    'CHARACTER_OK_HAND': '\U0001F44C',
    'CHARACTER_VICTORY_HAND': '\u270C\uFE0F',
    'CHARACTER_CROSSED_FINGERS': '\U0001F91E',
    'CHARACTER_THUMBS_UP': '\U0001F44D',
    'CHARACTER_THUMBS_UP_MEDIUM_LIGHT_SKIN_TONE': '\U0001F44D\U0001F3FC',
    'CHARACTER_THUMBS_UP_MEDIUM_DARK_SKIN_TONE': '\U0001F44D\U0001F3FE',
    'CHARACTER_THUMBS_DOWN': '\U0001F44E',
    'CHARACTER_CLAPPING_HANDS': '\U0001F44F',
    'CHARACTER_RAISING_HANDS': '\U0001F64C',
    'CHARACTER_FOLDED_HANDS': '\U0001F64F',
    'CHARACTER_WRITING_HAND': '\u270D\uFE0F',
    'CHARACTER_FLEXED_BICEPS': '\U0001F4AA',
    'CHARACTER_BRAIN': '\U0001F9E0',
    'CHARACTER_EYES': '\U0001F440',
    'CHARACTER_BABY': '\U0001F476',
    'CHARACTER_PERSON': '\U0001F9D1',
    'CHARACTER_MAN': '\U0001F468',
    'CHARACTER_WOMAN': '\U0001F469',
    'CHARACTER_OLD_MAN': '\U0001F474',
    'CHARACTER_OLD_WOMAN': '\U0001F475',
    'CHARACTER_MAN_TECHNOLOGIST': '\U0001F468\u200D\U0001F4BB',
    'CHARACTER_WOMAN_TECHNOLOGIST': '\U0001F469\u200D\U0001F4BB',
    'CHARACTER_WOMAN_SCIENTIST': '\U0001F469\u200D\U0001F52C',
    'CHARACTER_MAN_ASTRONAUT': '\U0001F468\u200D\U0001F680',
    'CHARACTER_WOMAN_FIREFIGHTER': '\U0001F469\u200D\U0001F692',
    'CHARACTER_PERSON_RUNNING': '\U0001F3C3',
    'CHARACTER_WOMAN_RUNNING': '\U0001F3C3\u200D\u2640\uFE0F',
    'CHARACTER_MAN_SHRUGGING': '\U0001F937\u200D\u2642\uFE0F',
    'CHARACTER_WOMAN_SHRUGGING': '\U0001F937\u200D\u2640\uFE0F',
    'CHARACTER_COUPLE_WITH_HEART': '\U0001F491',
    'CHARACTER_KISS_WOMAN_MAN': '\U0001F469\u200D\u2764\uFE0F\u200D\U0001F48B\u200D\U0001F468',
    'CHARACTER_FAMILY_MAN_WOMAN_GIRL_BOY': '\U0001F468\u200D\U0001F469\u200D\U0001F467\u200D\U0001F466',

    # Animals & Nature
    'CHARACTER_DOG_FACE': '\U0001F436',
    'CHARACTER_SERVICE_DOG': '\U0001F415\u200D\U0001F9BA',
    'CHARACTER_CAT_FACE': '\U0001F431',
    'CHARACTER_BLACK_CAT': '\U0001F408\u200D\u2B1B',
    'CHARACTER_MOUSE_FACE': '\U0001F42D',
    'CHARACTER_FOX': '\U0001F98A',
    'CHARACTER_BEAR': '\U0001F43B',
    'CHARACTER_POLAR_BEAR': '\U0001F43B\u200D\u2744\uFE0F',
    'CHARACTER_PANDA': '\U0001F43C',
    'CHARACTER_KOALA': '\U0001F428',
    'CHARACTER_TIGER_FACE': '\U0001F42F',
    'CHARACTER_LION': '\U0001F981',
    'CHARACTER_COW_FACE': '\U0001F42E',
    'CHARACTER_PIG_FACE': '\U0001F437',
    'CHARACTER_FROG': '\U0001F438',
    'CHARACTER_MONKEY_FACE': '\U0001F435',
    'CHARACTER_CHICKEN': '\U0001F414',
    'CHARACTER_PENGUIN': '\U0001F427',
    'CHARACTER_BIRD': '\U0001F426',
    'CHARACTER_EAGLE': '\U0001F985',
    'CHARACTER_OWL': '\U0001F989',
    'CHARACTER_UNICORN': '\U0001F984',
    'CHARACTER_HONEYBEE': '\U0001F41D',
    'CHARACTER_BUTTERFLY': '\U0001F98B',
    'CHARACTER_SNAIL': '\U0001F40C',
    'CHARACTER_LADY_BEETLE': '\U0001F41E',
    'CHARACTER_TURTLE': '\U0001F422',
    'CHARACTER_SNAKE': '\U0001F40D',
    'CHARACTER_SAUROPOD': '\U0001F995',
    'CHARACTER_T_REX': '\U0001F996',
    'CHARACTER_SPOUTING_WHALE': '\U0001F433',
    'CHARACTER_DOLPHIN': '\U0001F42C',
    'CHARACTER_OCTOPUS': '\U0001F419',
    'CHARACTER_CHERRY_BLOSSOM': '\U0001F338',
    'CHARACTER_ROSE': '\U0001F339',
    'CHARACTER_SUNFLOWER': '\U0001F33B',
    'CHARACTER_SEEDLING': '\U0001F331',
    'CHARACTER_EVERGREEN_TREE': '\U0001F332',
    'CHARACTER_CACTUS': '\U0001F335',
    'CHARACTER_FOUR_LEAF_CLOVER': '\U0001F340',

    # Food & Drink
    'CHARACTER_RED_APPLE': '\U0001F34E',
    'CHARACTER_BANANA': '\U0001F34C',
    'CHARACTER_WATERMELON': '\U0001F349',
    'CHARACTER_GRAPES': '\U0001F347',
    'CHARACTER_STRAWBERRY': '\U0001F353',
    'CHARACTER_AVOCADO': '\U0001F951',
    'CHARACTER_HOT_PEPPER': '\U0001F336\uFE0F',
    'CHARACTER_PIZZA': '\U0001F355',
    'CHARACTER_HAMBURGER': '\U0001F354',
    'CHARACTER_TACO': '\U0001F32E',
    'CHARACTER_SUSHI': '\U0001F363',
    'CHARACTER_DOUGHNUT': '\U0001F369',
    'CHARACTER_BIRTHDAY_CAKE': '\U0001F382',
    'CHARACTER_HOT_BEVERAGE': '\u2615',
    'CHARACTER_BEER_MUG': '\U0001F37A',
    'CHARACTER_CLINKING_GLASSES': '\U0001F942',

    # Travel & Places
    'CHARACTER_GLOBE_SHOWING_EUROPE_AFRICA': '\U0001F30D',
    'CHARACTER_SNOW_CAPPED_MOUNTAIN': '\U0001F3D4\uFE0F',
    'CHARACTER_VOLCANO': '\U0001F30B',
    'CHARACTER_HOUSE': '\U0001F3E0',
    'CHARACTER_AUTOMOBILE': '\U0001F697',
    'CHARACTER_BICYCLE': '\U0001F6B2',
    'CHARACTER_AIRPLANE': '\u2708\uFE0F',
    'CHARACTER_ROCKET': '\U0001F680',
    'CHARACTER_HOURGLASS_DONE': '\u231B',
    'CHARACTER_ALARM_CLOCK': '\u23F0',
    'CHARACTER_SUN': '\u2600\uFE0F',
    'CHARACTER_CRESCENT_MOON': '\U0001F319',
    'CHARACTER_STAR': '\u2B50',
    'CHARACTER_CLOUD': '\u2601\uFE0F',
    'CHARACTER_RAINBOW': '\U0001F308',
    'CHARACTER_UMBRELLA_WITH_RAIN_DROPS': '\u2614',
    'CHARACTER_HIGH_VOLTAGE': '\u26A1',
    'CHARACTER_SNOWFLAKE': '\u2744\uFE0F',
    'CHARACTER_FIRE': '\U0001F525',
    'CHARACTER_DROPLET': '\U0001F4A7',
    'CHARACTER_WATER_WAVE': '\U0001F30A',

    # Activities
    'CHARACTER_JACK_O_LANTERN': '\U0001F383',
    'CHARACTER_CHRISTMAS_TREE': '\U0001F384',
    'CHARACTER_FIREWORKS': '\U0001F386',
    'CHARACTER_SPARKLES': '\u2728',
    'CHARACTER_BALLOON': '\U0001F388',
    'CHARACTER_PARTY_POPPER': '\U0001F389',
    'CHARACTER_WRAPPED_GIFT': '\U0001F381',
    'CHARACTER_1ST_PLACE_MEDAL': '\U0001F947',
    'CHARACTER_2ND_PLACE_MEDAL': '\U0001F948',
    'CHARACTER_3RD_PLACE_MEDAL': '\U0001F949',
    'CHARACTER_SOCCER_BALL': '\u26BD',
    'CHARACTER_BASKETBALL': '\U0001F3C0',
    'CHARACTER_VIDEO_GAME': '\U0001F3AE',
    'CHARACTER_GAME_DIE': '\U0001F3B2',

    # Objects
    'CHARACTER_MUSICAL_NOTE': '\U0001F3B5',
    'CHARACTER_GUITAR': '\U0001F3B8',
    'CHARACTER_MOBILE_PHONE': '\U0001F4F1',
    'CHARACTER_LAPTOP': '\U0001F4BB',
    'CHARACTER_LIGHT_BULB': '\U0001F4A1',
    'CHARACTER_BOOKS': '\U0001F4DA',
    'CHARACTER_ENVELOPE': '\u2709\uFE0F',
    'CHARACTER_PENCIL': '\u270F\uFE0F',
    'CHARACTER_MEMO': '\U0001F4DD',
    'CHARACTER_CALENDAR': '\U0001F4C5',
    'CHARACTER_PUSHPIN': '\U0001F4CC',
    'CHARACTER_LOCKED': '\U0001F512',
    'CHARACTER_KEY': '\U0001F511',
    'CHARACTER_HAMMER_AND_WRENCH': '\U0001F6E0\uFE0F',
    'CHARACTER_GEAR': '\u2699\uFE0F',
    'CHARACTER_TEST_TUBE': '\U0001F9EA',
    'CHARACTER_MAGNIFYING_GLASS_TILTED_LEFT': '\U0001F50D',
    'CHARACTER_BELL': '\U0001F514',

    # Symbols
    'CHARACTER_CHECK_MARK_BUTTON': '\u2705',
    'CHARACTER_CHECK_MARK': '\u2714\uFE0F',
    'CHARACTER_CROSS_MARK': '\u274C',
    'CHARACTER_WARNING': '\u26A0\uFE0F',
    'CHARACTER_NO_ENTRY': '\u26D4',
    'CHARACTER_PROHIBITED': '\U0001F6AB',
    'CHARACTER_RED_QUESTION_MARK': '\u2753',
    'CHARACTER_RED_EXCLAMATION_MARK': '\u2757',
    'CHARACTER_RECYCLING_SYMBOL': '\u267B\uFE0F',
    'CHARACTER_INFINITY': '\u267E\uFE0F',
    'CHARACTER_UP_ARROW': '\u2B06\uFE0F',
    'CHARACTER_DOWN_ARROW': '\u2B07\uFE0F',
    'CHARACTER_RIGHT_ARROW': '\u27A1\uFE0F',
    'CHARACTER_LEFT_ARROW': '\u2B05\uFE0F',
    'CHARACTER_RED_CIRCLE': '\U0001F534',
    'CHARACTER_GREEN_CIRCLE': '\U0001F7E2',
    'CHARACTER_BLUE_CIRCLE': '\U0001F535',
    'CHARACTER_COPYRIGHT': '\u00A9\uFE0F',
    'CHARACTER_REGISTERED': '\u00AE\uFE0F',
    'CHARACTER_TRADE_MARK': '\u2122\uFE0F',
    'CHARACTER_KEYCAP_NUMBER_SIGN': '\u0023\uFE0F\u20E3',
    'CHARACTER_KEYCAP_ASTERISK': '\u002A\uFE0F\u20E3',
    'CHARACTER_KEYCAP_0': '\u0030\uFE0F\u20E3',
    'CHARACTER_KEYCAP_1': '\u0031\uFE0F\u20E3',
    'CHARACTER_KEYCAP_2': '\u0032\uFE0F\u20E3',
    'CHARACTER_KEYCAP_3': '\u0033\uFE0F\u20E3',
    'CHARACTER_KEYCAP_4': '\u0034\uFE0F\u20E3',
    'CHARACTER_KEYCAP_5': '\u0035\uFE0F\u20E3',
    'CHARACTER_KEYCAP_6': '\u0036\uFE0F\u20E3',
    'CHARACTER_KEYCAP_7': '\u0037\uFE0F\u20E3',
    'CHARACTER_KEYCAP_8': '\u0038\uFE0F\u20E3',
    'CHARACTER_KEYCAP_9': '\u0039\uFE0F\u20E3',
    'CHARACTER_KEYCAP_10': '\U0001F51F',
    'CHARACTER_A_BUTTON_BLOOD_TYPE': '\U0001F170\uFE0F',
    'CHARACTER_AB_BUTTON_BLOOD_TYPE': '\U0001F18E',
    'CHARACTER_B_BUTTON_BLOOD_TYPE': '\U0001F171\uFE0F',
    'CHARACTER_O_BUTTON_BLOOD_TYPE': '\U0001F17E\uFE0F',
    'CHARACTER_COOL_BUTTON': '\U0001F192',
    'CHARACTER_FREE_BUTTON': '\U0001F193',
    'CHARACTER_NEW_BUTTON': '\U0001F195',
    'CHARACTER_OK_BUTTON': '\U0001F197',
    'CHARACTER_SOS_BUTTON': '\U0001F198',

    # Flags
    'CHARACTER_CHEQUERED_FLAG': '\U0001F3C1',
    'CHARACTER_TRIANGULAR_FLAG': '\U0001F6A9',
    'CHARACTER_BLACK_FLAG': '\U0001F3F4',
    'CHARACTER_WHITE_FLAG': '\U0001F3F3\uFE0F',
    'CHARACTER_RAINBOW_FLAG': '\U0001F3F3\uFE0F\u200D\U0001F308',
    'CHARACTER_TRANSGENDER_FLAG': '\U0001F3F3\uFE0F\u200D\u26A7\uFE0F',
    'CHARACTER_PIRATE_FLAG': '\U0001F3F4\u200D\u2620\uFE0F',
    'CHARACTER_FLAG_ARGENTINA': '\U0001F1E6\U0001F1F7',
    'CHARACTER_FLAG_AUSTRALIA': '\U0001F1E6\U0001F1FA',
    'CHARACTER_FLAG_BELGIUM': '\U0001F1E7\U0001F1EA',
    'CHARACTER_FLAG_BRAZIL': '\U0001F1E7\U0001F1F7',
    'CHARACTER_FLAG_CANADA': '\U0001F1E8\U0001F1E6',
    'CHARACTER_FLAG_CHINA': '\U0001F1E8\U0001F1F3',
    'CHARACTER_FLAG_EGYPT': '\U0001F1EA\U0001F1EC',
    'CHARACTER_FLAG_EUROPEAN_UNION': '\U0001F1EA\U0001F1FA',
    'CHARACTER_FLAG_FRANCE': '\U0001F1EB\U0001F1F7',
    'CHARACTER_FLAG_GERMANY': '\U0001F1E9\U0001F1EA',
    'CHARACTER_FLAG_INDIA': '\U0001F1EE\U0001F1F3',
    'CHARACTER_FLAG_ITALY': '\U0001F1EE\U0001F1F9',
    'CHARACTER_FLAG_JAPAN': '\U0001F1EF\U0001F1F5',
    'CHARACTER_FLAG_MEXICO': '\U0001F1F2\U0001F1FD',
    'CHARACTER_FLAG_NETHERLANDS': '\U0001F1F3\U0001F1F1',
    'CHARACTER_FLAG_NEW_ZEALAND': '\U0001F1F3\U0001F1FF',
    'CHARACTER_FLAG_NIGERIA': '\U0001F1F3\U0001F1EC',
    'CHARACTER_FLAG_NORWAY': '\U0001F1F3\U0001F1F4',
    'CHARACTER_FLAG_SOUTH_AFRICA': '\U0001F1FF\U0001F1E6',
    'CHARACTER_FLAG_SOUTH_KOREA': '\U0001F1F0\U0001F1F7',
    'CHARACTER_FLAG_SPAIN': '\U0001F1EA\U0001F1F8',
    'CHARACTER_FLAG_SWEDEN': '\U0001F1F8\U0001F1EA',
    'CHARACTER_FLAG_UKRAINE': '\U0001F1FA\U0001F1E6',
    'CHARACTER_FLAG_UNITED_KINGDOM': '\U0001F1EC\U0001F1E7',
    'CHARACTER_FLAG_UNITED_NATIONS': '\U0001F1FA\U0001F1F3',
    'CHARACTER_FLAG_UNITED_STATES': '\U0001F1FA\U0001F1F8',
    'CHARACTER_FLAG_ENGLAND': '\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F',
    'CHARACTER_FLAG_SCOTLAND': '\U0001F3F4\U000E0067\U000E0062\U000E0073\U000E0063\U000E0074\U000E007F',
    'CHARACTER_FLAG_WALES': '\U0001F3F4\U000E0067\U000E0062\U000E0077\U000E006C\U000E0073\U000E007F',
})
