"""
Adobe Font Metrics of the 14 standard PDF fonts.

Widths are given in 1/1000 of the text space unit. The tables of the text fonts
are indexed by WinAnsiEncoding code, the tables of Symbol and ZapfDingbats by
their builtin encoding code.
"""

from typing import NamedTuple


class StandardFontData(NamedTuple):
    widths: dict
    ascent: int
    descent: int
    cap_height: int
    bbox: tuple


HELVETICA_WIDTHS = {
    32: 278, 33: 278, 34: 355, 35: 556, 36: 556, 37: 889, 38: 667, 39: 191,
    40: 333, 41: 333, 42: 389, 43: 584, 44: 278, 45: 333, 46: 278, 47: 278,
    48: 556, 49: 556, 50: 556, 51: 556, 52: 556, 53: 556, 54: 556, 55: 556,
    56: 556, 57: 556, 58: 278, 59: 278, 60: 584, 61: 584, 62: 584, 63: 556,
    64: 1015, 65: 667, 66: 667, 67: 722, 68: 722, 69: 611, 70: 556, 71: 778,
    72: 722, 73: 278, 74: 500, 75: 667, 76: 556, 77: 833, 78: 722, 79: 778,
    80: 667, 81: 778, 82: 722, 83: 667, 84: 611, 85: 722, 86: 667, 87: 944,
    88: 667, 89: 667, 90: 611, 91: 278, 92: 278, 93: 278, 94: 469, 95: 556,
    96: 333, 97: 556, 98: 556, 99: 500, 100: 556, 101: 556, 102: 278, 103: 556,
    104: 556, 105: 222, 106: 222, 107: 500, 108: 222, 109: 833, 110: 556, 111: 556,
    112: 556, 113: 556, 114: 333, 115: 500, 116: 278, 117: 556, 118: 500, 119: 722,
    120: 500, 121: 500, 122: 500, 123: 334, 124: 260, 125: 334, 126: 584, 128: 556,
    130: 222, 131: 556, 132: 333, 133: 1000, 134: 556, 135: 556, 136: 333, 137: 1000,
    138: 667, 139: 333, 140: 1000, 142: 611, 145: 222, 146: 222, 147: 333, 148: 333,
    149: 350, 150: 556, 151: 1000, 152: 333, 153: 1000, 154: 500, 155: 333, 156: 944,
    158: 500, 159: 667, 160: 278, 161: 333, 162: 556, 163: 556, 164: 556, 165: 556,
    166: 260, 167: 556, 168: 333, 169: 737, 170: 370, 171: 556, 172: 584, 173: 333,
    174: 737, 175: 333, 176: 400, 177: 584, 178: 333, 179: 333, 180: 333, 181: 556,
    182: 537, 183: 278, 184: 333, 185: 333, 186: 365, 187: 556, 188: 834, 189: 834,
    190: 834, 191: 611, 192: 667, 193: 667, 194: 667, 195: 667, 196: 667, 197: 667,
    198: 1000, 199: 722, 200: 611, 201: 611, 202: 611, 203: 611, 204: 278, 205: 278,
    206: 278, 207: 278, 208: 722, 209: 722, 210: 778, 211: 778, 212: 778, 213: 778,
    214: 778, 215: 584, 216: 778, 217: 722, 218: 722, 219: 722, 220: 722, 221: 667,
    222: 667, 223: 611, 224: 556, 225: 556, 226: 556, 227: 556, 228: 556, 229: 556,
    230: 889, 231: 500, 232: 556, 233: 556, 234: 556, 235: 556, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 556, 241: 556, 242: 556, 243: 556, 244: 556, 245: 556,
    246: 556, 247: 584, 248: 611, 249: 556, 250: 556, 251: 556, 252: 556, 253: 500,
    254: 556, 255: 500,
}

HELVETICA_BOLD_WIDTHS = {
    32: 278, 33: 333, 34: 474, 35: 556, 36: 556, 37: 889, 38: 722, 39: 238,
    40: 333, 41: 333, 42: 389, 43: 584, 44: 278, 45: 333, 46: 278, 47: 278,
    48: 556, 49: 556, 50: 556, 51: 556, 52: 556, 53: 556, 54: 556, 55: 556,
    56: 556, 57: 556, 58: 333, 59: 333, 60: 584, 61: 584, 62: 584, 63: 611,
    64: 975, 65: 722, 66: 722, 67: 722, 68: 722, 69: 667, 70: 611, 71: 778,
    72: 722, 73: 278, 74: 556, 75: 722, 76: 611, 77: 833, 78: 722, 79: 778,
    80: 667, 81: 778, 82: 722, 83: 667, 84: 611, 85: 722, 86: 667, 87: 944,
    88: 667, 89: 667, 90: 611, 91: 333, 92: 278, 93: 333, 94: 584, 95: 556,
    96: 333, 97: 556, 98: 611, 99: 556, 100: 611, 101: 556, 102: 333, 103: 611,
    104: 611, 105: 278, 106: 278, 107: 556, 108: 278, 109: 889, 110: 611, 111: 611,
    112: 611, 113: 611, 114: 389, 115: 556, 116: 333, 117: 611, 118: 556, 119: 778,
    120: 556, 121: 556, 122: 500, 123: 389, 124: 280, 125: 389, 126: 584, 128: 556,
    130: 278, 131: 556, 132: 500, 133: 1000, 134: 556, 135: 556, 136: 333, 137: 1000,
    138: 667, 139: 333, 140: 1000, 142: 611, 145: 278, 146: 278, 147: 500, 148: 500,
    149: 350, 150: 556, 151: 1000, 152: 333, 153: 1000, 154: 556, 155: 333, 156: 944,
    158: 500, 159: 667, 160: 278, 161: 333, 162: 556, 163: 556, 164: 556, 165: 556,
    166: 280, 167: 556, 168: 333, 169: 737, 170: 370, 171: 556, 172: 584, 173: 333,
    174: 737, 175: 333, 176: 400, 177: 584, 178: 333, 179: 333, 180: 333, 181: 611,
    182: 556, 183: 278, 184: 333, 185: 333, 186: 365, 187: 556, 188: 834, 189: 834,
    190: 834, 191: 611, 192: 722, 193: 722, 194: 722, 195: 722, 196: 722, 197: 722,
    198: 1000, 199: 722, 200: 667, 201: 667, 202: 667, 203: 667, 204: 278, 205: 278,
    206: 278, 207: 278, 208: 722, 209: 722, 210: 778, 211: 778, 212: 778, 213: 778,
    214: 778, 215: 584, 216: 778, 217: 722, 218: 722, 219: 722, 220: 722, 221: 667,
    222: 667, 223: 611, 224: 556, 225: 556, 226: 556, 227: 556, 228: 556, 229: 556,
    230: 889, 231: 556, 232: 556, 233: 556, 234: 556, 235: 556, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 611, 241: 611, 242: 611, 243: 611, 244: 611, 245: 611,
    246: 611, 247: 584, 248: 611, 249: 611, 250: 611, 251: 611, 252: 611, 253: 556,
    254: 611, 255: 556,
}

TIMES_ROMAN_WIDTHS = {
    32: 250, 33: 333, 34: 408, 35: 500, 36: 500, 37: 833, 38: 778, 39: 180,
    40: 333, 41: 333, 42: 500, 43: 564, 44: 250, 45: 333, 46: 250, 47: 278,
    48: 500, 49: 500, 50: 500, 51: 500, 52: 500, 53: 500, 54: 500, 55: 500,
    56: 500, 57: 500, 58: 278, 59: 278, 60: 564, 61: 564, 62: 564, 63: 444,
    64: 921, 65: 722, 66: 667, 67: 667, 68: 722, 69: 611, 70: 556, 71: 722,
    72: 722, 73: 333, 74: 389, 75: 722, 76: 611, 77: 889, 78: 722, 79: 722,
    80: 556, 81: 722, 82: 667, 83: 556, 84: 611, 85: 722, 86: 722, 87: 944,
    88: 722, 89: 722, 90: 611, 91: 333, 92: 278, 93: 333, 94: 469, 95: 500,
    96: 333, 97: 444, 98: 500, 99: 444, 100: 500, 101: 444, 102: 333, 103: 500,
    104: 500, 105: 278, 106: 278, 107: 500, 108: 278, 109: 778, 110: 500, 111: 500,
    112: 500, 113: 500, 114: 333, 115: 389, 116: 278, 117: 500, 118: 500, 119: 722,
    120: 500, 121: 500, 122: 444, 123: 480, 124: 200, 125: 480, 126: 541, 128: 500,
    130: 333, 131: 500, 132: 444, 133: 1000, 134: 500, 135: 500, 136: 333, 137: 1000,
    138: 556, 139: 333, 140: 889, 142: 611, 145: 333, 146: 333, 147: 444, 148: 444,
    149: 350, 150: 500, 151: 1000, 152: 333, 153: 980, 154: 389, 155: 333, 156: 722,
    158: 444, 159: 722, 160: 250, 161: 333, 162: 500, 163: 500, 164: 500, 165: 500,
    166: 200, 167: 500, 168: 333, 169: 760, 170: 276, 171: 500, 172: 564, 173: 333,
    174: 760, 175: 333, 176: 400, 177: 564, 178: 300, 179: 300, 180: 333, 181: 500,
    182: 453, 183: 250, 184: 333, 185: 300, 186: 310, 187: 500, 188: 750, 189: 750,
    190: 750, 191: 444, 192: 722, 193: 722, 194: 722, 195: 722, 196: 722, 197: 722,
    198: 889, 199: 667, 200: 611, 201: 611, 202: 611, 203: 611, 204: 333, 205: 333,
    206: 333, 207: 333, 208: 722, 209: 722, 210: 722, 211: 722, 212: 722, 213: 722,
    214: 722, 215: 564, 216: 722, 217: 722, 218: 722, 219: 722, 220: 722, 221: 722,
    222: 556, 223: 500, 224: 444, 225: 444, 226: 444, 227: 444, 228: 444, 229: 444,
    230: 667, 231: 444, 232: 444, 233: 444, 234: 444, 235: 444, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 500, 241: 500, 242: 500, 243: 500, 244: 500, 245: 500,
    246: 500, 247: 564, 248: 500, 249: 500, 250: 500, 251: 500, 252: 500, 253: 500,
    254: 500, 255: 500,
}

TIMES_BOLD_WIDTHS = {
    32: 250, 33: 333, 34: 555, 35: 500, 36: 500, 37: 1000, 38: 833, 39: 278,
    40: 333, 41: 333, 42: 500, 43: 570, 44: 250, 45: 333, 46: 250, 47: 278,
    48: 500, 49: 500, 50: 500, 51: 500, 52: 500, 53: 500, 54: 500, 55: 500,
    56: 500, 57: 500, 58: 333, 59: 333, 60: 570, 61: 570, 62: 570, 63: 500,
    64: 930, 65: 722, 66: 667, 67: 722, 68: 722, 69: 667, 70: 611, 71: 778,
    72: 778, 73: 389, 74: 500, 75: 778, 76: 667, 77: 944, 78: 722, 79: 778,
    80: 611, 81: 778, 82: 722, 83: 556, 84: 667, 85: 722, 86: 722, 87: 1000,
    88: 722, 89: 722, 90: 667, 91: 333, 92: 278, 93: 333, 94: 581, 95: 500,
    96: 333, 97: 500, 98: 556, 99: 444, 100: 556, 101: 444, 102: 333, 103: 500,
    104: 556, 105: 278, 106: 333, 107: 556, 108: 278, 109: 833, 110: 556, 111: 500,
    112: 556, 113: 556, 114: 444, 115: 389, 116: 333, 117: 556, 118: 500, 119: 722,
    120: 500, 121: 500, 122: 444, 123: 394, 124: 220, 125: 394, 126: 520, 128: 500,
    130: 333, 131: 500, 132: 500, 133: 1000, 134: 500, 135: 500, 136: 333, 137: 1000,
    138: 556, 139: 333, 140: 1000, 142: 667, 145: 333, 146: 333, 147: 500, 148: 500,
    149: 350, 150: 500, 151: 1000, 152: 333, 153: 1000, 154: 389, 155: 333, 156: 722,
    158: 444, 159: 722, 160: 250, 161: 333, 162: 500, 163: 500, 164: 500, 165: 500,
    166: 220, 167: 500, 168: 333, 169: 747, 170: 300, 171: 500, 172: 570, 173: 333,
    174: 747, 175: 333, 176: 400, 177: 570, 178: 300, 179: 300, 180: 333, 181: 556,
    182: 540, 183: 250, 184: 333, 185: 300, 186: 330, 187: 500, 188: 750, 189: 750,
    190: 750, 191: 500, 192: 722, 193: 722, 194: 722, 195: 722, 196: 722, 197: 722,
    198: 1000, 199: 722, 200: 667, 201: 667, 202: 667, 203: 667, 204: 389, 205: 389,
    206: 389, 207: 389, 208: 722, 209: 722, 210: 778, 211: 778, 212: 778, 213: 778,
    214: 778, 215: 570, 216: 778, 217: 722, 218: 722, 219: 722, 220: 722, 221: 722,
    222: 611, 223: 556, 224: 500, 225: 500, 226: 500, 227: 500, 228: 500, 229: 500,
    230: 722, 231: 444, 232: 444, 233: 444, 234: 444, 235: 444, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 500, 241: 556, 242: 500, 243: 500, 244: 500, 245: 500,
    246: 500, 247: 570, 248: 500, 249: 556, 250: 556, 251: 556, 252: 556, 253: 500,
    254: 556, 255: 500,
}

TIMES_ITALIC_WIDTHS = {
    32: 250, 33: 333, 34: 420, 35: 500, 36: 500, 37: 833, 38: 778, 39: 214,
    40: 333, 41: 333, 42: 500, 43: 675, 44: 250, 45: 333, 46: 250, 47: 278,
    48: 500, 49: 500, 50: 500, 51: 500, 52: 500, 53: 500, 54: 500, 55: 500,
    56: 500, 57: 500, 58: 333, 59: 333, 60: 675, 61: 675, 62: 675, 63: 500,
    64: 920, 65: 611, 66: 611, 67: 667, 68: 722, 69: 611, 70: 611, 71: 722,
    72: 722, 73: 333, 74: 444, 75: 667, 76: 556, 77: 833, 78: 667, 79: 722,
    80: 611, 81: 722, 82: 611, 83: 500, 84: 556, 85: 722, 86: 611, 87: 833,
    88: 611, 89: 556, 90: 556, 91: 389, 92: 278, 93: 389, 94: 422, 95: 500,
    96: 333, 97: 500, 98: 500, 99: 444, 100: 500, 101: 444, 102: 278, 103: 500,
    104: 500, 105: 278, 106: 278, 107: 444, 108: 278, 109: 722, 110: 500, 111: 500,
    112: 500, 113: 500, 114: 389, 115: 389, 116: 278, 117: 500, 118: 444, 119: 667,
    120: 444, 121: 444, 122: 389, 123: 400, 124: 275, 125: 400, 126: 541, 128: 500,
    130: 333, 131: 500, 132: 556, 133: 889, 134: 500, 135: 500, 136: 333, 137: 1000,
    138: 500, 139: 333, 140: 944, 142: 556, 145: 333, 146: 333, 147: 556, 148: 556,
    149: 350, 150: 500, 151: 889, 152: 333, 153: 980, 154: 389, 155: 333, 156: 722,
    158: 389, 159: 556, 160: 250, 161: 389, 162: 500, 163: 500, 164: 500, 165: 500,
    166: 275, 167: 500, 168: 333, 169: 760, 170: 276, 171: 500, 172: 675, 173: 333,
    174: 760, 175: 333, 176: 400, 177: 675, 178: 300, 179: 300, 180: 333, 181: 500,
    182: 523, 183: 250, 184: 333, 185: 300, 186: 310, 187: 500, 188: 750, 189: 750,
    190: 750, 191: 500, 192: 611, 193: 611, 194: 611, 195: 611, 196: 611, 197: 611,
    198: 889, 199: 667, 200: 611, 201: 611, 202: 611, 203: 611, 204: 333, 205: 333,
    206: 333, 207: 333, 208: 722, 209: 667, 210: 722, 211: 722, 212: 722, 213: 722,
    214: 722, 215: 675, 216: 722, 217: 722, 218: 722, 219: 722, 220: 722, 221: 556,
    222: 611, 223: 500, 224: 500, 225: 500, 226: 500, 227: 500, 228: 500, 229: 500,
    230: 667, 231: 444, 232: 444, 233: 444, 234: 444, 235: 444, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 500, 241: 500, 242: 500, 243: 500, 244: 500, 245: 500,
    246: 500, 247: 675, 248: 500, 249: 500, 250: 500, 251: 500, 252: 500, 253: 444,
    254: 500, 255: 444,
}

TIMES_BOLD_ITALIC_WIDTHS = {
    32: 250, 33: 389, 34: 555, 35: 500, 36: 500, 37: 833, 38: 778, 39: 278,
    40: 333, 41: 333, 42: 500, 43: 570, 44: 250, 45: 333, 46: 250, 47: 278,
    48: 500, 49: 500, 50: 500, 51: 500, 52: 500, 53: 500, 54: 500, 55: 500,
    56: 500, 57: 500, 58: 333, 59: 333, 60: 570, 61: 570, 62: 570, 63: 500,
    64: 832, 65: 667, 66: 667, 67: 667, 68: 722, 69: 667, 70: 667, 71: 722,
    72: 778, 73: 389, 74: 500, 75: 667, 76: 611, 77: 889, 78: 722, 79: 722,
    80: 611, 81: 722, 82: 667, 83: 556, 84: 611, 85: 722, 86: 667, 87: 889,
    88: 667, 89: 611, 90: 611, 91: 333, 92: 278, 93: 333, 94: 570, 95: 500,
    96: 333, 97: 500, 98: 500, 99: 444, 100: 500, 101: 444, 102: 333, 103: 500,
    104: 556, 105: 278, 106: 278, 107: 500, 108: 278, 109: 778, 110: 556, 111: 500,
    112: 556, 113: 500, 114: 389, 115: 389, 116: 278, 117: 556, 118: 444, 119: 667,
    120: 500, 121: 444, 122: 389, 123: 348, 124: 220, 125: 348, 126: 570, 128: 500,
    130: 333, 131: 500, 132: 500, 133: 1000, 134: 500, 135: 500, 136: 333, 137: 1000,
    138: 556, 139: 333, 140: 944, 142: 611, 145: 333, 146: 333, 147: 500, 148: 500,
    149: 350, 150: 500, 151: 1000, 152: 333, 153: 1000, 154: 389, 155: 333, 156: 722,
    158: 389, 159: 611, 160: 250, 161: 389, 162: 500, 163: 500, 164: 500, 165: 500,
    166: 220, 167: 500, 168: 333, 169: 747, 170: 266, 171: 500, 172: 606, 173: 333,
    174: 747, 175: 333, 176: 400, 177: 570, 178: 300, 179: 300, 180: 333, 181: 576,
    182: 500, 183: 250, 184: 333, 185: 300, 186: 300, 187: 500, 188: 750, 189: 750,
    190: 750, 191: 500, 192: 667, 193: 667, 194: 667, 195: 667, 196: 667, 197: 667,
    198: 944, 199: 667, 200: 667, 201: 667, 202: 667, 203: 667, 204: 389, 205: 389,
    206: 389, 207: 389, 208: 722, 209: 722, 210: 722, 211: 722, 212: 722, 213: 722,
    214: 722, 215: 570, 216: 722, 217: 722, 218: 722, 219: 722, 220: 722, 221: 611,
    222: 611, 223: 500, 224: 500, 225: 500, 226: 500, 227: 500, 228: 500, 229: 500,
    230: 722, 231: 444, 232: 444, 233: 444, 234: 444, 235: 444, 236: 278, 237: 278,
    238: 278, 239: 278, 240: 500, 241: 556, 242: 500, 243: 500, 244: 500, 245: 500,
    246: 500, 247: 570, 248: 500, 249: 556, 250: 556, 251: 556, 252: 556, 253: 444,
    254: 500, 255: 444,
}

SYMBOL_WIDTHS = {
    32: 250, 33: 333, 34: 713, 35: 500, 36: 549, 37: 833, 38: 778, 39: 439,
    40: 333, 41: 333, 42: 500, 43: 549, 44: 250, 45: 549, 46: 250, 47: 278,
    48: 500, 49: 500, 50: 500, 51: 500, 52: 500, 53: 500, 54: 500, 55: 500,
    56: 500, 57: 500, 58: 278, 59: 278, 60: 549, 61: 549, 62: 549, 63: 444,
    65: 722, 66: 667, 67: 722, 68: 612, 69: 611, 70: 763, 71: 603, 72: 722,
    73: 333, 74: 631, 75: 722, 76: 686, 77: 889, 78: 722, 79: 722, 80: 768,
    81: 741, 82: 556, 83: 592, 84: 611, 85: 690, 86: 439, 87: 768, 88: 645,
    89: 795, 90: 611, 97: 611, 98: 611, 99: 549, 100: 611, 101: 549, 102: 611,
    103: 556, 104: 603, 105: 329, 106: 603, 107: 549, 108: 549, 109: 576, 110: 521,
    111: 549, 112: 549, 113: 521, 114: 549, 115: 603, 116: 439, 117: 576, 118: 713,
    119: 686, 120: 493, 121: 686, 122: 494,
}

ZAPFDINGBATS_WIDTHS = {
    32: 278, 33: 974, 34: 961, 35: 974, 36: 980, 37: 719, 38: 789, 39: 790,
    40: 791, 41: 690, 42: 960, 43: 939, 44: 549, 45: 855, 46: 911, 47: 933,
    48: 911, 49: 945, 50: 974, 51: 755, 52: 846, 53: 762, 54: 761, 55: 571,
    56: 677, 57: 763, 58: 760, 59: 759, 60: 754, 61: 494, 62: 552, 63: 537,
    64: 577, 65: 692, 66: 786, 67: 788, 68: 788, 69: 790, 70: 793, 71: 794,
    72: 816, 73: 823, 74: 789, 75: 841, 76: 823, 77: 833, 78: 816, 79: 831,
    80: 923, 81: 744, 82: 723, 83: 749, 84: 790, 85: 792, 86: 695, 87: 776,
    88: 768, 89: 792, 90: 759, 91: 707, 92: 708, 93: 682, 94: 701, 95: 826,
    96: 815, 97: 789, 98: 789, 99: 707, 100: 687, 101: 696, 102: 689, 103: 786,
    104: 787, 105: 713, 106: 791, 107: 785, 108: 791, 109: 873, 110: 761, 111: 762,
    112: 762, 113: 759, 114: 759, 115: 892, 116: 892, 117: 788, 118: 784, 119: 438,
    120: 138, 121: 277, 122: 415,
}


# Every glyph of the Courier family is 600 units wide
COURIER_WIDTHS = {
    code: 600 for code in range(32, 256) if code not in (127, 129, 141, 143, 144, 157)
}

STANDARD_FONTS = {
    "Helvetica": StandardFontData(
        HELVETICA_WIDTHS, 718, -207, 718, (-166, -225, 1000, 931)
    ),
    "Helvetica-Bold": StandardFontData(
        HELVETICA_BOLD_WIDTHS, 718, -207, 718, (-170, -228, 1003, 962)
    ),
    "Helvetica-Oblique": StandardFontData(
        HELVETICA_WIDTHS, 718, -207, 718, (-170, -225, 1116, 931)
    ),
    "Helvetica-BoldOblique": StandardFontData(
        HELVETICA_BOLD_WIDTHS, 718, -207, 718, (-174, -228, 1114, 962)
    ),
    "Times-Roman": StandardFontData(
        TIMES_ROMAN_WIDTHS, 683, -217, 662, (-168, -218, 1000, 898)
    ),
    "Times-Bold": StandardFontData(
        TIMES_BOLD_WIDTHS, 683, -217, 676, (-168, -218, 1000, 935)
    ),
    "Times-Italic": StandardFontData(
        TIMES_ITALIC_WIDTHS, 683, -217, 653, (-169, -217, 1010, 883)
    ),
    "Times-BoldItalic": StandardFontData(
        TIMES_BOLD_ITALIC_WIDTHS, 683, -217, 669, (-200, -218, 996, 921)
    ),
    "Courier": StandardFontData(
        COURIER_WIDTHS, 629, -157, 562, (-23, -250, 715, 805)
    ),
    "Courier-Bold": StandardFontData(
        COURIER_WIDTHS, 629, -157, 562, (-113, -250, 749, 801)
    ),
    "Courier-Oblique": StandardFontData(
        COURIER_WIDTHS, 629, -157, 562, (-27, -250, 849, 805)
    ),
    "Courier-BoldOblique": StandardFontData(
        COURIER_WIDTHS, 629, -157, 562, (-57, -250, 869, 801)
    ),
    "Symbol": StandardFontData(
        SYMBOL_WIDTHS, 800, -200, 700, (-180, -293, 1090, 1010)
    ),
    "ZapfDingbats": StandardFontData(
        ZAPFDINGBATS_WIDTHS, 800, -200, 700, (-1, -143, 981, 820)
    ),
}
