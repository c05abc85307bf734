"""
Static MIDI manufacturer identifier table.

Keys are the identifier bytes as uppercase hexadecimal strings: two
digits for one-byte identifiers ("43"), six digits for three-byte
identifiers ("00200E"). Values are (display name, canonical name, group).

Source: MIDI Association manufacturer SysEx ID list.
Group is taken from the identifier range:
    01-1F / 00 00-1F xx   American
    20-3F / 00 20-3F xx   European & Other
    40-5F / 00 40-5F xx   Japanese
    60-7F / 00 60-7F xx   Other / reserved
"""

from types import MappingProxyType
from typing import Mapping, Tuple

ManufacturerEntry = Tuple[str, str, str]

_ENTRIES = {
    "01": ("Sequential Circuits", "Sequential Circuits", "american"),
    "02": ("IDP", "IDP", "american"),
    "03": ("Voyetra Turtle Beach, Inc.", "Voyetra Turtle Beach, Inc.", "american"),
    "04": ("Moog Music", "Moog Music", "american"),
    "05": ("Passport Designs", "Passport Designs", "american"),
    "06": ("Lexicon Inc.", "Lexicon Inc.", "american"),
    "07": ("Kurzweil / Young Chang", "Kurzweil / Young Chang", "american"),
    "08": ("Fender", "Fender", "american"),
    "09": ("MIDI9", "MIDI9", "american"),
    "0A": ("AKG Acoustics", "AKG Acoustics", "american"),
    "0B": ("Voyce Music", "Voyce Music", "american"),
    "0C": ("WaveFrame (Timeline)", "WaveFrame (Timeline)", "american"),
    "0D": ("ADA Signal Processors, Inc.", "ADA Signal Processors, Inc.", "american"),
    "0E": ("Garfield Electronics", "Garfield Electronics", "american"),
    "0F": ("Ensoniq", "Ensoniq Corp.", "american"),
    "10": ("Oberheim / Gibson Labs", "Oberheim / Gibson Labs", "american"),
    "11": ("Apple", "Apple", "american"),
    "12": ("Grey Matter Response", "Grey Matter Response", "american"),
    "13": ("Digidesign Inc.", "Digidesign Inc.", "american"),
    "14": ("Palmtree Instruments", "Palmtree Instruments", "american"),
    "15": ("JLCooper Electronics", "JLCooper Electronics", "american"),
    "16": ("Lowrey Organ Company", "Lowrey Organ Company", "american"),
    "17": ("Adams-Smith", "Adams-Smith", "american"),
    "18": ("E-mu", "E-mu", "american"),
    "19": ("Harmony Systems", "Harmony Systems", "american"),
    "1A": ("ART", "ART", "american"),
    "1B": ("Baldwin", "Baldwin", "american"),
    "1C": ("Eventide", "Eventide", "american"),
    "1D": ("Inventronics", "Inventronics", "american"),
    "1E": ("Key Concepts", "Key Concepts", "american"),
    "1F": ("Clarity", "Clarity", "american"),
    "20": ("Passac", "Passac", "european"),
    "21": ("Proel Labs (SIEL)", "Proel Labs (SIEL)", "european"),
    "22": ("Synthaxe (UK)", "Synthaxe (UK)", "european"),
    "23": ("Stepp", "Stepp", "european"),
    "24": ("Hohner", "Hohner", "european"),
    "25": ("Twister", "Twister", "european"),
    "26": ("Ketron s.r.l.", "Ketron s.r.l.", "european"),
    "27": ("Jellinghaus MS", "Jellinghaus MS", "european"),
    "28": ("Southworth Music Systems", "Southworth Music Systems", "european"),
    "29": ("PPG (Germany)", "PPG (Germany)", "european"),
    "2A": ("JEN", "JEN", "european"),
    "2B": ("Solid State Logic Organ Systems", "Solid State Logic Organ Systems", "european"),
    "2C": ("Audio Veritrieb-P. Struven", "Audio Veritrieb-P. Struven", "european"),
    "2D": ("Neve", "Neve", "european"),
    "2E": ("Soundtracs Ltd.", "Soundtracs Ltd.", "european"),
    "2F": ("Elka", "Elka", "european"),
    "30": ("Dynacord", "Dynacord", "european"),
    "31": ("Viscount International Spa (Intercontinental Electronics)", "Viscount International Spa (Intercontinental Electronics)", "european"),
    "32": ("Drawmer", "Drawmer", "european"),
    "33": ("Clavia Digital Instruments", "Clavia Digital Instruments", "european"),
    "34": ("Audio Architecture", "Audio Architecture", "european"),
    "35": ("Generalmusic Corp SpA", "Generalmusic Corp SpA", "european"),
    "36": ("Cheetah Marketing", "Cheetah Marketing", "european"),
    "37": ("C.T.M.", "C.T.M.", "european"),
    "38": ("Simmons UK", "Simmons UK", "european"),
    "39": ("Soundcraft Electronics", "Soundcraft Electronics", "european"),
    "3A": ("Steinberg Media Technologies GmbH", "Steinberg Media Technologies GmbH", "european"),
    "3B": ("Wersi Gmbh", "Wersi Gmbh", "european"),
    "3C": ("AVAB Niethammer AB", "AVAB Niethammer AB", "european"),
    "3D": ("Digigram", "Digigram", "european"),
    "3E": ("Waldorf", "Waldorf Electronics GmbH", "european"),
    "3F": ("Quasimidi", "Quasimidi", "european"),
    "000001": ("Time/Warner Interactive", "Time/Warner Interactive", "american"),
    "000002": ("Advanced Gravis Comp. Tech Ltd.", "Advanced Gravis Comp. Tech Ltd.", "american"),
    "000003": ("Media Vision", "Media Vision", "american"),
    "000004": ("Dornes Research Group", "Dornes Research Group", "american"),
    "000005": ("K-Muse", "K-Muse", "american"),
    "000006": ("Stypher", "Stypher", "american"),
    "000007": ("Digital Music Corp.", "Digital Music Corp.", "american"),
    "000008": ("IOTA Systems", "IOTA Systems", "american"),
    "000009": ("New England Digital", "New England Digital", "american"),
    "00000A": ("Artisyn", "Artisyn", "american"),
    "00000B": ("IVL Technologies Ltd.", "IVL Technologies Ltd.", "american"),
    "00000C": ("Southern Music Systems", "Southern Music Systems", "american"),
    "00000D": ("Lake Butler Sound Company", "Lake Butler Sound Company", "american"),
    "00000E": ("Alesis", "Alesis Studio Electronics", "american"),
    "00000F": ("Sound Creation", "Sound Creation", "american"),
    "000010": ("DOD Electronics Corp.", "DOD Electronics Corp.", "american"),
    "000011": ("Studer-Editech", "Studer-Editech", "american"),
    "000012": ("Sonus", "Sonus", "american"),
    "000013": ("Temporal Acuity Products", "Temporal Acuity Products", "american"),
    "000014": ("Perfect Fretworks", "Perfect Fretworks", "american"),
    "000015": ("KAT Inc.", "KAT Inc.", "american"),
    "000016": ("Opcode Systems", "Opcode Systems", "american"),
    "000017": ("Rane Corporation", "Rane Corporation", "american"),
    "000018": ("Anadi Electronique", "Anadi Electronique", "american"),
    "000019": ("KMX", "KMX", "american"),
    "00001A": ("Allen & Heath Brenell", "Allen & Heath Brenell", "american"),
    "00001B": ("Peavey Electronics", "Peavey Electronics", "american"),
    "00001C": ("360 Systems", "360 Systems", "american"),
    "00001D": ("Spectrum Design and Development", "Spectrum Design and Development", "american"),
    "00001E": ("Marquis Music", "Marquis Music", "american"),
    "00001F": ("Zeta Systems", "Zeta Systems", "american"),
    "000020": ("Axxes (Brian Parsonett)", "Axxes (Brian Parsonett)", "american"),
    "000021": ("Orban", "Orban", "american"),
    "000022": ("Indian Valley Mfg.", "Indian Valley Mfg.", "american"),
    "000023": ("Triton", "Triton", "american"),
    "000024": ("KTI", "KTI", "american"),
    "000025": ("Breakway Technologies", "Breakway Technologies", "american"),
    "000026": ("Leprecon / CAE Inc.", "Leprecon / CAE Inc.", "american"),
    "000027": ("Harrison Systems Inc.", "Harrison Systems Inc.", "american"),
    "000028": ("Future Lab/Mark Kuo", "Future Lab/Mark Kuo", "american"),
    "000029": ("Rocktron Corporation", "Rocktron Corporation", "american"),
    "00002A": ("PianoDisc", "PianoDisc", "american"),
    "00002B": ("Cannon Research Group", "Cannon Research Group", "american"),
    "00002C": ("Reserved", "Reserved", "american"),
    "00002D": ("Rodgers Instrument LLC", "Rodgers Instrument LLC", "american"),
    "00002E": ("Blue Sky Logic", "Blue Sky Logic", "american"),
    "00002F": ("Encore Electronics", "Encore Electronics", "american"),
    "000030": ("Uptown", "Uptown", "american"),
    "000031": ("Voce", "Voce", "american"),
    "000032": ("CTI Audio, Inc. (Musically Intel. Devs.)", "CTI Audio, Inc. (Musically Intel. Devs.)", "american"),
    "000033": ("S3 Incorporated", "S3 Incorporated", "american"),
    "000034": ("Broderbund / Red Orb", "Broderbund / Red Orb", "american"),
    "000035": ("Allen Organ Co.", "Allen Organ Co.", "american"),
    "000036": ("Reserved", "Reserved", "american"),
    "000037": ("Music Quest", "Music Quest", "american"),
    "000038": ("Aphex", "Aphex", "american"),
    "000039": ("Gallien Krueger", "Gallien Krueger", "american"),
    "00003A": ("IBM", "IBM", "american"),
    "00003B": ("MOTU", "Mark Of The Unicorn", "american"),
    "00003C": ("Hotz Corporation", "Hotz Corporation", "american"),
    "00003D": ("ETA Lighting", "ETA Lighting", "american"),
    "00003E": ("NSI Corporation", "NSI Corporation", "american"),
    "00003F": ("Ad Lib, Inc.", "Ad Lib, Inc.", "american"),
    "000040": ("Richmond Sound Design", "Richmond Sound Design", "american"),
    "000041": ("Microsoft", "Microsoft", "american"),
    "000042": ("Mindscape (Software Toolworks)", "Mindscape (Software Toolworks)", "american"),
    "000043": ("Russ Jones Marketing / Niche", "Russ Jones Marketing / Niche", "american"),
    "000044": ("Intone", "Intone", "american"),
    "000045": ("Advanced Remote Technologies", "Advanced Remote Technologies", "american"),
    "000046": ("White Instruments", "White Instruments", "american"),
    "000047": ("GT Electronics/Groove Tubes", "GT Electronics/Groove Tubes", "american"),
    "000048": ("Pacific Research & Engineering", "Pacific Research & Engineering", "american"),
    "000049": ("Timeline Vista, Inc.", "Timeline Vista, Inc.", "american"),
    "00004A": ("Mesa Boogie Ltd.", "Mesa Boogie Ltd.", "american"),
    "00004B": ("FSLI", "FSLI", "american"),
    "00004C": ("Sequoia Development Group", "Sequoia Development Group", "american"),
    "00004D": ("Studio Electronics", "Studio Electronics", "american"),
    "00004E": ("Euphonix, Inc", "Euphonix, Inc", "american"),
    "00004F": ("InterMIDI, Inc.", "InterMIDI, Inc.", "american"),
    "000050": ("MIDI Solutions Inc.", "MIDI Solutions Inc.", "american"),
    "000051": ("3DO Company", "3DO Company", "american"),
    "000052": ("Lightwave Research / High End Systems", "Lightwave Research / High End Systems", "american"),
    "000053": ("Micro-W Corporation", "Micro-W Corporation", "american"),
    "000054": ("Spectral Synthesis, Inc.", "Spectral Synthesis, Inc.", "american"),
    "000055": ("Lone Wolf", "Lone Wolf", "american"),
    "000056": ("Studio Technologies Inc.", "Studio Technologies Inc.", "american"),
    "000057": ("Peterson Electro-Musical Product, Inc.", "Peterson Electro-Musical Product, Inc.", "american"),
    "000058": ("Atari Corporation", "Atari Corporation", "american"),
    "000059": ("Marion Systems Corporation", "Marion Systems Corporation", "american"),
    "00005A": ("Design Event", "Design Event", "american"),
    "00005B": ("Winjammer Software Ltd.", "Winjammer Software Ltd.", "american"),
    "00005C": ("AT&T Bell Laboratories", "AT&T Bell Laboratories", "american"),
    "00005D": ("Reserved", "Reserved", "american"),
    "00005E": ("Symetrix", "Symetrix", "american"),
    "00005F": ("MIDI the World", "MIDI the World", "american"),
    "000060": ("Spatializer", "Spatializer", "american"),
    "000061": ("Micros ‘N MIDI", "Micros ‘N MIDI", "american"),
    "000062": ("Accordians International", "Accordians International", "american"),
    "000063": ("EuPhonics (now 3Com)", "EuPhonics (now 3Com)", "american"),
    "000064": ("Musonix", "Musonix", "american"),
    "000065": ("Turtle Beach Systems (Voyetra)", "Turtle Beach Systems (Voyetra)", "american"),
    "000066": ("Loud Technologies / Mackie", "Loud Technologies / Mackie", "american"),
    "000067": ("Compuserve", "Compuserve", "american"),
    "000068": ("BEC Technologies", "BEC Technologies", "american"),
    "000069": ("QRS Music Inc", "QRS Music Inc", "american"),
    "00006A": ("P.G. Music", "P.G. Music", "american"),
    "00006B": ("Sierra Semiconductor", "Sierra Semiconductor", "american"),
    "00006C": ("EpiGraf", "EpiGraf", "american"),
    "00006D": ("Electronics Diversified Inc", "Electronics Diversified Inc", "american"),
    "00006E": ("Tune 1000", "Tune 1000", "american"),
    "00006F": ("Advanced Micro Devices", "Advanced Micro Devices", "american"),
    "000070": ("Mediamation", "Mediamation", "american"),
    "000071": ("Sabine Musical Mfg. Co. Inc.", "Sabine Musical Mfg. Co. Inc.", "american"),
    "000072": ("Woog Labs", "Woog Labs", "american"),
    "000073": ("Micropolis Corp", "Micropolis Corp", "american"),
    "000074": ("Ta Horng Musical Instrument", "Ta Horng Musical Instrument", "american"),
    "000075": ("e-Tek Labs (Forte Tech)", "e-Tek Labs (Forte Tech)", "american"),
    "000076": ("Electro-Voice", "Electro-Voice", "american"),
    "000077": ("Midisoft Corporation", "Midisoft Corporation", "american"),
    "000078": ("QSound Labs", "QSound Labs", "american"),
    "000079": ("Westrex", "Westrex", "american"),
    "00007A": ("Nvidia", "Nvidia", "american"),
    "00007B": ("ESS Technology", "ESS Technology", "american"),
    "00007C": ("Media Trix Peripherals", "Media Trix Peripherals", "american"),
    "00007D": ("Brooktree Corp", "Brooktree Corp", "american"),
    "00007E": ("Otari Corp", "Otari Corp", "american"),
    "00007F": ("Key Electronics, Inc.", "Key Electronics, Inc.", "american"),
    "000100": ("Shure Incorporated", "Shure Incorporated", "american"),
    "000101": ("AuraSound", "AuraSound", "american"),
    "000102": ("Crystal Semiconductor", "Crystal Semiconductor", "american"),
    "000103": ("Conexant (Rockwell)", "Conexant (Rockwell)", "american"),
    "000104": ("Silicon Graphics", "Silicon Graphics", "american"),
    "000105": ("M-Audio (Midiman)", "M-Audio (Midiman)", "american"),
    "000106": ("PreSonus", "PreSonus", "american"),
    "000108": ("Topaz Enterprises", "Topaz Enterprises", "american"),
    "000109": ("Cast Lighting", "Cast Lighting", "american"),
    "00010A": ("Microsoft Consumer Division", "Microsoft Consumer Division", "american"),
    "00010B": ("Sonic Foundry", "Sonic Foundry", "american"),
    "00010C": ("Line 6 (Fast Forward) (Yamaha)", "Line 6 (Fast Forward) (Yamaha)", "american"),
    "00010D": ("Beatnik Inc", "Beatnik Inc", "american"),
    "00010E": ("Van Koevering Company", "Van Koevering Company", "american"),
    "00010F": ("Altech Systems", "Altech Systems", "american"),
    "000110": ("S & S Research", "S & S Research", "american"),
    "000111": ("VLSI Technology", "VLSI Technology", "american"),
    "000112": ("Chromatic Research", "Chromatic Research", "american"),
    "000113": ("Sapphire", "Sapphire", "american"),
    "000114": ("IDRC", "IDRC", "american"),
    "000115": ("Justonic Tuning", "Justonic Tuning", "american"),
    "000116": ("TorComp Research Inc.", "TorComp Research Inc.", "american"),
    "000117": ("Newtek Inc.", "Newtek Inc.", "american"),
    "000118": ("Sound Sculpture", "Sound Sculpture", "american"),
    "000119": ("Walker Technical", "Walker Technical", "american"),
    "00011A": ("Digital Harmony (PAVO)", "Digital Harmony (PAVO)", "american"),
    "00011B": ("InVision Interactive", "InVision Interactive", "american"),
    "00011C": ("T-Square Design", "T-Square Design", "american"),
    "00011D": ("Nemesys Music Technology", "Nemesys Music Technology", "american"),
    "00011E": ("DBX Professional (Harman Intl)", "DBX Professional (Harman Intl)", "american"),
    "00011F": ("Syndyne Corporation", "Syndyne Corporation", "american"),
    "002000": ("Dream SAS", "Dream SAS", "european"),
    "002001": ("Strand Lighting", "Strand Lighting", "european"),
    "002002": ("Amek Div of Harman Industries", "Amek Div of Harman Industries", "european"),
    "002003": ("Casa Di Risparmio Di Loreto", "Casa Di Risparmio Di Loreto", "european"),
    "002004": ("Böhm electronic GmbH", "Böhm electronic GmbH", "european"),
    "002005": ("Syntec Digital Audio", "Syntec Digital Audio", "european"),
    "002006": ("Trident Audio Developments", "Trident Audio Developments", "european"),
    "002007": ("Real World Studio", "Real World Studio", "european"),
    "002008": ("Evolution Synthesis, Ltd", "Evolution Synthesis, Ltd", "european"),
    "002009": ("Yes Technology", "Yes Technology", "european"),
    "00200A": ("Audiomatica", "Audiomatica", "european"),
    "00200B": ("Bontempi SpA (Sigma)", "Bontempi SpA (Sigma)", "european"),
    "00200C": ("F.B.T. Elettronica SpA", "F.B.T. Elettronica SpA", "european"),
    "00200D": ("MidiTemp GmbH", "MidiTemp GmbH", "european"),
    "00200E": ("LA Audio (Larking Audio)", "LA Audio (Larking Audio)", "european"),
    "00200F": ("Zero 88 Lighting Limited", "Zero 88 Lighting Limited", "european"),
    "002010": ("Micon Audio Electronics GmbH", "Micon Audio Electronics GmbH", "european"),
    "002011": ("Forefront Technology", "Forefront Technology", "european"),
    "002012": ("Studio Audio and Video Ltd.", "Studio Audio and Video Ltd.", "european"),
    "002013": ("Kenton Electronics", "Kenton Electronics", "european"),
    "00201F": ("TC Electronics", "TC Electronics", "european"),
    "002020": ("Doepfer Musikelektronik GmbH", "Doepfer Musikelektronik GmbH", "european"),
    "002021": ("Creative ATC / E-mu", "Creative ATC / E-mu", "european"),
    "002029": ("Focusrite/Novation", "Focusrite/Novation", "european"),
    "002032": ("Behringer", "Behringer GmbH", "european"),
    "002033": ("Access Music Electronics", "Access Music Electronics", "european"),
    "00203A": ("Propellerhead", "Propellerhead Software", "european"),
    "00206B": ("Arturia", "Arturia", "european"),
    "002076": ("Teenage Engineering", "Teenage Engineering", "european"),
    "002103": ("PreSonus Software Ltd", "PreSonus Software Ltd", "european"),
    "002109": ("Native Instruments", "Native Instruments", "european"),
    "002110": ("ROLI Ltd", "ROLI Ltd", "european"),
    "00211A": ("IK Multimedia", "IK Multimedia", "european"),
    "00211D": ("Ableton", "Ableton", "european"),
    "40": ("Kawai", "Kawai Musical Instruments MFG. CO. Ltd", "japanese"),
    "41": ("Roland", "Roland Corporation", "japanese"),
    "42": ("KORG", "Korg Inc.", "japanese"),
    "43": ("Yamaha", "Yamaha Corporation", "japanese"),
    "44": ("Casio", "Casio Computer Co. Ltd", "japanese"),
    "46": ("Kamiya Studio Co. Ltd", "Kamiya Studio Co. Ltd", "japanese"),
    "47": ("Akai", "Akai Electric Co. Ltd.", "japanese"),
    "48": ("Victor Company of Japan, Ltd.", "Victor Company of Japan, Ltd.", "japanese"),
    "4B": ("Fujitsu Limited", "Fujitsu Limited", "japanese"),
    "4C": ("Sony Corporation", "Sony Corporation", "japanese"),
    "4E": ("Teac Corporation", "Teac Corporation", "japanese"),
    "50": ("Matsushita Electric Industrial Co. , Ltd", "Matsushita Electric Industrial Co. , Ltd", "japanese"),
    "51": ("Fostex Corporation", "Fostex Corporation", "japanese"),
    "52": ("Zoom Corporation", "Zoom Corporation", "japanese"),
    "54": ("Matsushita Communication Industrial Co., Ltd.", "Matsushita Communication Industrial Co., Ltd.", "japanese"),
    "55": ("Suzuki Musical Instruments MFG. Co., Ltd.", "Suzuki Musical Instruments MFG. Co., Ltd.", "japanese"),
    "56": ("Fuji Sound Corporation Ltd.", "Fuji Sound Corporation Ltd.", "japanese"),
    "57": ("Acoustic Technical Laboratory, Inc.", "Acoustic Technical Laboratory, Inc.", "japanese"),
    "59": ("Faith, Inc.", "Faith, Inc.", "japanese"),
    "5A": ("Internet Corporation", "Internet Corporation", "japanese"),
    "5C": ("Seekers Co. Ltd.", "Seekers Co. Ltd.", "japanese"),
    "5F": ("SD Card Association", "SD Card Association", "japanese"),
    "004000": ("Crimson Technology Inc.", "Crimson Technology Inc.", "japanese"),
    "004001": ("Softbank Mobile Corp", "Softbank Mobile Corp", "japanese"),
    "004003": ("D&M Holdings Inc.", "D&M Holdings Inc.", "japanese"),
    "004004": ("Xing Inc.", "Xing Inc.", "japanese"),
    "004005": ("Alpha Theta Corporation", "Alpha Theta Corporation", "japanese"),
    "004006": ("Pioneer Corporation", "Pioneer Corporation", "japanese"),
    "004007": ("Slik Corporation", "Slik Corporation", "japanese"),
    "7D": ("Development / Non-Commercial", "Development / Non-Commercial", "other"),
}

MANUFACTURERS: Mapping[str, ManufacturerEntry] = MappingProxyType(_ENTRIES)
