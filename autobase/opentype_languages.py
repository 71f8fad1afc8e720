"""ISO 639 language codes mapped to OpenType language system tags.

Follows the OpenType Layout tag registry. Individual languages without a tag of
their own map to their macrolanguage or to a grouping tag such as `CPP `
(creoles); codes with no sensible tag are absent.
"""

OPENTYPE_LANGUAGE_TAGS = {
    "aa": "AFR ",
    "aae": "SQI ",
    "aao": "ARA ",
    "aat": "SQI ",
    "ab": "ABK ",
    "abh": "ARA ",
    "abq": "ABA ",
    "abs": "CPP ",
    "abv": "ARA ",
    "acf": "FAN ",
    "acm": "ARA ",
    "acq": "ARA ",
    "acr": "ACR ",
    "acw": "ARA ",
    "acx": "ARA ",
    "acy": "ACY ",
    "ada": "DNG ",
    "adf": "ARA ",
    "adp": "DZN ",
    "aeb": "ARA ",
    "aec": "ARA ",
    "af": "AFK ",
    "afb": "ARA ",
    "afs": "CPP ",
    "agu": "MYN ",
    "ahg": "AGW ",
    "aht": "ATH ",
    "aig": "CPP ",
    "aii": "SWA ",
    "aiw": "ARI ",
    "ajp": "ARA ",
    "ajt": "ARA ",
    "ak": "AKA ",
    "akb": "AKB ",
    "aln": "SQI ",
    "als": "SQI ",
    "am": "AMH ",
    "amf": "HBN ",
    "amw": "SYR ",
    "an": "ARG ",
    "aoa": "CPP ",
    "apa": "ATH ",
    "apc": "ARA ",
    "apd": "ARA ",
    "apj": "ATH ",
    "apk": "ATH ",
    "apl": "ATH ",
    "apm": "ATH ",
    "apw": "ATH ",
    "ar": "ARA ",
    "arb": "ARA ",
    "arn": "MAP ",
    "arq": "ARA ",
    "ars": "ARA ",
    "ary": "MOR ",
    "arz": "ARA ",
    "as": "ASM ",
    "atj": "RCR ",
    "atv": "ALT ",
    "auj": "BBR ",
    "auz": "ARA ",
    "av": "AVR ",
    "avl": "ARA ",
    "ay": "AYM ",
    "ayc": "AYM ",
    "ayh": "ARA ",
    "ayl": "ARA ",
    "ayn": "ARA ",
    "ayp": "ARA ",
    "ayr": "AYM ",
    "az": "AZE ",
    "azb": "AZB ",
    "azd": "NAH ",
    "azj": "AZE ",
    "azn": "NAH ",
    "azz": "NAH ",
    "ba": "BSH ",
    "bad": "BAD0",
    "bah": "CPP ",
    "bai": "BML ",
    "bal": "BLI ",
    "bbc": "BBC ",
    "bbj": "BML ",
    "bbp": "BAD0",
    "bbz": "ARA ",
    "bcc": "BLI ",
    "bci": "BAU ",
    "bcl": "BIK ",
    "bcq": "BCH ",
    "bcr": "ATH ",
    "be": "BEL ",
    "bea": "ATH ",
    "beb": "BTI ",
    "ber": "BBR ",
    "bew": "CPP ",
    "bfl": "BAD0",
    "bfq": "BAD ",
    "bft": "BLT ",
    "bfu": "LAH ",
    "bfy": "BAG ",
    "bg": "BGR ",
    "bgn": "BLI ",
    "bgp": "BLI ",
    "bgq": "BGQ ",
    "bgr": "QIN ",
    "bhb": "BHI ",
    "bhk": "BIK ",
    "bhr": "MLG ",
    "bi": "BIS ",
    "bin": "EDO ",
    "biu": "QIN ",
    "bjn": "MLY ",
    "bjo": "BAD0",
    "bjq": "MLG ",
    "bjs": "CPP ",
    "bjt": "BLN ",
    "bko": "BML ",
    "bla": "BKF ",
    "ble": "BLN ",
    "blg": "IBA ",
    "blk": "BLK ",
    "bln": "BIK ",
    "bm": "BMB ",
    "bmm": "MLG ",
    "bn": "BEN ",
    "bo": "TIB ",
    "bpd": "BAD0",
    "bpl": "CPP ",
    "bpq": "CPP ",
    "bqi": "LRC ",
    "bqk": "BAD0",
    "br": "BRE ",
    "bra": "BRI ",
    "brc": "CPP ",
    "bs": "BOS ",
    "btb": "BTI ",
    "btd": "BTD ",
    "btj": "MLY ",
    "btm": "BTM ",
    "bto": "BIK ",
    "bts": "BTS ",
    "btx": "BTX ",
    "btz": "BTZ ",
    "bum": "BTI ",
    "bve": "MLY ",
    "bvu": "MLY ",
    "bwe": "KRN ",
    "bxk": "LUH ",
    "bxo": "CPP ",
    "bxp": "BTI ",
    "bxr": "RBU ",
    "byn": "BIL ",
    "byv": "BYV ",
    "bzc": "MLG ",
    "bzj": "CPP ",
    "bzk": "CPP ",
    "ca": "CAT ",
    "caa": "MYN ",
    "cac": "MYN ",
    "caf": "CRR ",
    "cak": "CAK ",
    "cbk": "CBK ",
    "cbl": "QIN ",
    "ccl": "CPP ",
    "ccm": "CPP ",
    "cco": "CCHN",
    "ccq": "ARK ",
    "cdo": "ZHS ",
    "ce": "CHE ",
    "cek": "QIN ",
    "cey": "QIN ",
    "cfm": "HAL ",
    "ch": "CHA ",
    "chf": "MYN ",
    "chj": "CCHN",
    "chk": "CHK0",
    "chm": "HMA ",
    "chn": "CPP ",
    "chp": "CHP ",
    "chq": "CCHN",
    "chz": "CCHN",
    "ciw": "OJB ",
    "cjy": "ZHS ",
    "cka": "QIN ",
    "ckb": "KUR ",
    "ckn": "QIN ",
    "cks": "CPP ",
    "ckt": "CHK ",
    "ckz": "MYN ",
    "clc": "ATH ",
    "cld": "SYR ",
    "cle": "CCHN",
    "clj": "QIN ",
    "cls": "SAN ",
    "clt": "QIN ",
    "cmn": "ZHS ",
    "cmr": "QIN ",
    "cnb": "QIN ",
    "cnh": "QIN ",
    "cnk": "QIN ",
    "cnl": "CCHN",
    "cnp": "ZHS ",
    "cnr": "SRB ",
    "cnt": "CCHN",
    "cnu": "BBR ",
    "cnw": "QIN ",
    "co": "COS ",
    "coa": "MLY ",
    "cob": "MYN ",
    "coq": "ATH ",
    "cpa": "CCHN",
    "cpe": "CPP ",
    "cpf": "CPP ",
    "cpi": "CPP ",
    "cpx": "ZHS ",
    "cqd": "HMN ",
    "cqu": "QUH ",
    "cr": "CRE ",
    "crh": "CRT ",
    "cri": "CPP ",
    "crj": "ECR ",
    "crk": "WCR ",
    "crl": "ECR ",
    "crm": "MCR ",
    "crp": "CPP ",
    "crs": "CPP ",
    "crx": "CRR ",
    "cs": "CSY ",
    "csa": "CCHN",
    "csh": "QIN ",
    "csj": "QIN ",
    "cso": "CCHN",
    "csp": "ZHS ",
    "csv": "QIN ",
    "csw": "NCR ",
    "csy": "QIN ",
    "ctc": "ATH ",
    "ctd": "QIN ",
    "cte": "CCHN",
    "cth": "QIN ",
    "ctl": "CCHN",
    "cts": "BIK ",
    "ctu": "MYN ",
    "cu": "CSL ",
    "cuc": "CCHN",
    "cv": "CHU ",
    "cvn": "CCHN",
    "cwd": "DCR ",
    "cy": "WEL ",
    "czh": "ZHS ",
    "czo": "ZHS ",
    "czt": "QIN ",
    "da": "DAN ",
    "dao": "QIN ",
    "dap": "NIS ",
    "dcr": "CPP ",
    "de": "DEU ",
    "den": "SLA ",
    "dep": "CPP ",
    "dgo": "DGO ",
    "dgr": "ATH ",
    "dhd": "MAW ",
    "dib": "DNK ",
    "dik": "DNK ",
    "din": "DNK ",
    "dip": "DNK ",
    "diq": "DIQ ",
    "diw": "DNK ",
    "dje": "DJR ",
    "djk": "CPP ",
    "djr": "DJR0",
    "dks": "DNK ",
    "dng": "DUN ",
    "doi": "DGR ",
    "drh": "MNG ",
    "drw": "DRI ",
    "dsb": "LSB ",
    "dty": "NEP ",
    "dup": "MLY ",
    "dv": "DIV ",
    "dwk": "KUI ",
    "dwu": "DUJ ",
    "dwy": "DUJ ",
    "dyu": "JUL ",
    "dz": "DZN ",
    "ee": "EWE ",
    "ekk": "ETI ",
    "eky": "KRN ",
    "el": "ELL ",
    "emk": "EMK ",
    "emy": "MYN ",
    "en": "ENG ",
    "enb": "KAL ",
    "enf": "FNE ",
    "enh": "TNE ",
    "eo": "NTO ",
    "es": "ESP ",
    "esg": "GON ",
    "esi": "IPK ",
    "esk": "IPK ",
    "et": "ETI ",
    "eto": "BTI ",
    "eu": "EUQ ",
    "eve": "EVN ",
    "evn": "EVK ",
    "ewo": "BTI ",
    "eyo": "KAL ",
    "fa": "FAR ",
    "fab": "CPP ",
    "fan": "FAN0",
    "fat": "FAT ",
    "fbl": "BIK ",
    "ff": "FUL ",
    "ffm": "FUL ",
    "fi": "FIN ",
    "fil": "PIL ",
    "fj": "FJI ",
    "flm": "HAL ",
    "fmp": "FMP ",
    "fng": "CPP ",
    "fo": "FOS ",
    "fpe": "CPP ",
    "fr": "FRA ",
    "fub": "FUL ",
    "fuc": "FUL ",
    "fue": "FUL ",
    "fuf": "FTA ",
    "fuh": "FUL ",
    "fui": "FUL ",
    "fuq": "FUL ",
    "fur": "FRL ",
    "fuv": "FUV ",
    "fy": "FRI ",
    "ga": "IRI ",
    "gaa": "GAD ",
    "gac": "CPP ",
    "gan": "ZHS ",
    "gax": "ORO ",
    "gaz": "ORO ",
    "gbm": "GAW ",
    "gce": "ATH ",
    "gcf": "CPP ",
    "gcl": "CPP ",
    "gcr": "CPP ",
    "gd": "GAE ",
    "gda": "RAJ ",
    "ggo": "GON ",
    "gha": "BBR ",
    "ghc": "IRT ",
    "ghk": "KRN ",
    "gho": "BBR ",
    "gib": "CPP ",
    "gil": "GIL0",
    "gju": "RAJ ",
    "gkp": "GKP ",
    "gl": "GAL ",
    "gld": "NAN ",
    "gn": "GUA ",
    "gnb": "QIN ",
    "gno": "GON ",
    "gnw": "GUA ",
    "gom": "KOK ",
    "goq": "CPP ",
    "gox": "BAD0",
    "gpe": "CPP ",
    "grr": "BBR ",
    "grt": "GRO ",
    "gru": "SOG ",
    "gsw": "ALS ",
    "gu": "GUJ ",
    "gug": "GUA ",
    "gui": "GUA ",
    "guk": "GMZ ",
    "gul": "CPP ",
    "gun": "GUA ",
    "gv": "MNX ",
    "gwi": "ATH ",
    "gyn": "CPP ",
    "ha": "HAU ",
    "haa": "ATH ",
    "hae": "ORO ",
    "hai": "HAI0",
    "hak": "ZHS ",
    "har": "HRI ",
    "hax": "HAI0",
    "hca": "CPP ",
    "hdn": "HAI0",
    "he": "IWR ",
    "hea": "HMN ",
    "hi": "HIN ",
    "hji": "MLY ",
    "hlt": "QIN ",
    "hma": "HMN ",
    "hmc": "HMN ",
    "hmd": "HMD ",
    "hme": "HMN ",
    "hmg": "HMN ",
    "hmh": "HMN ",
    "hmi": "HMN ",
    "hmj": "HMN ",
    "hml": "HMN ",
    "hmm": "HMN ",
    "hmp": "HMN ",
    "hmq": "HMN ",
    "hmr": "QIN ",
    "hms": "HMN ",
    "hmw": "HMN ",
    "hmy": "HMN ",
    "hmz": "HMZ ",
    "hne": "CHH ",
    "hnj": "HMN ",
    "hnm": "ZHS ",
    "hno": "HND ",
    "ho": "HMO ",
    "hoc": "HO  ",
    "hoi": "ATH ",
    "hoj": "HAR ",
    "hr": "HRV ",
    "hra": "QIN ",
    "hrm": "HMN ",
    "hsb": "USB ",
    "hsn": "ZHS ",
    "ht": "HAI ",
    "hu": "HUN ",
    "huj": "HMN ",
    "hup": "ATH ",
    "hus": "MYN ",
    "hwc": "CPP ",
    "hy": "HYE0",
    "hyw": "HYE ",
    "hz": "HER ",
    "ia": "INA ",
    "iby": "IJO ",
    "icr": "CPP ",
    "id": "IND ",
    "ida": "LUH ",
    "idb": "CPP ",
    "ie": "ILE ",
    "ig": "IBO ",
    "igb": "EBI ",
    "ihb": "CPP ",
    "ii": "YIM ",
    "ijc": "IJO ",
    "ije": "IJO ",
    "ijn": "IJO ",
    "ijs": "IJO ",
    "ik": "IPK ",
    "ike": "INU ",
    "ikt": "INU ",
    "in": "IND ",
    "ing": "ATH ",
    "inh": "ING ",
    "io": "IDO ",
    "is": "ISL ",
    "it": "ITA ",
    "itz": "MYN ",
    "iu": "INU ",
    "iw": "IWR ",
    "ixl": "MYN ",
    "ja": "JAN ",
    "jac": "MYN ",
    "jak": "MLY ",
    "jam": "JAM ",
    "jax": "MLY ",
    "jbe": "BBR ",
    "jbn": "BBR ",
    "jgo": "BML ",
    "ji": "JII ",
    "jkm": "KRN ",
    "jkp": "KRN ",
    "jv": "JAV ",
    "jvd": "CPP ",
    "jw": "JAV ",
    "ka": "KAT ",
    "kaa": "KRK ",
    "kab": "KAB0",
    "kam": "KMB ",
    "kar": "KRN ",
    "kbd": "KAB ",
    "kby": "KNR ",
    "kca": "KHK ",
    "kcn": "CPP ",
    "kdr": "KRM ",
    "kdt": "KUY ",
    "kea": "KEA ",
    "kek": "KEK ",
    "kex": "KKN ",
    "kfa": "KOD ",
    "kfr": "KAC ",
    "kfx": "KUL ",
    "kfy": "KMN ",
    "kg": "KON0",
    "kha": "KSI ",
    "khb": "XBD ",
    "khk": "MNG ",
    "kht": "KHT ",
    "ki": "KIK ",
    "kiu": "KIU ",
    "kj": "KUA ",
    "kjb": "MYN ",
    "kjh": "KHA ",
    "kjp": "KJP ",
    "kjt": "KRN ",
    "kk": "KAZ ",
    "kkz": "ATH ",
    "kl": "GRN ",
    "kln": "KAL ",
    "km": "KHM ",
    "kmb": "MBN ",
    "kmr": "KUR ",
    "kmv": "CPP ",
    "kmw": "KMO ",
    "kn": "KAN ",
    "knc": "KNR ",
    "kng": "KON0",
    "knj": "MYN ",
    "knn": "KOK ",
    "ko": "KOR ",
    "koi": "KOP ",
    "koy": "ATH ",
    "kpe": "KPL ",
    "kpp": "KRN ",
    "kpv": "KOZ ",
    "kpy": "KYK ",
    "kqs": "KIS ",
    "kqy": "KRT ",
    "kr": "KNR ",
    "krc": "KAR ",
    "kri": "KRI ",
    "krt": "KNR ",
    "kru": "KUU ",
    "ks": "KSH ",
    "ksh": "KSH0",
    "kss": "KIS ",
    "ksw": "KSW ",
    "ktb": "KEB ",
    "ktu": "KON ",
    "ktw": "ATH ",
    "ku": "KUR ",
    "kuu": "ATH ",
    "kuw": "BAD0",
    "kv": "KOM ",
    "kvb": "MLY ",
    "kvl": "KRN ",
    "kvq": "KVQ ",
    "kvr": "MLY ",
    "kvt": "KRN ",
    "kvu": "KRN ",
    "kvy": "KRN ",
    "kw": "COR ",
    "kww": "CPP ",
    "kwy": "KON0",
    "kxc": "KMS ",
    "kxd": "MLY ",
    "kxf": "KRN ",
    "kxk": "KRN ",
    "kxl": "KUU ",
    "kxu": "KUI ",
    "ky": "KIR ",
    "kyu": "KYU ",
    "la": "LAT ",
    "lac": "MYN ",
    "lad": "JUD ",
    "lb": "LTZ ",
    "lbe": "LAK ",
    "lbj": "LDK ",
    "lbl": "BIK ",
    "lce": "MLY ",
    "lcf": "MLY ",
    "ldi": "KON0",
    "lg": "LUG ",
    "li": "LIM ",
    "lif": "LMB ",
    "lir": "CPP ",
    "liw": "MLY ",
    "liy": "BAD0",
    "lkb": "LUH ",
    "lko": "LUH ",
    "lks": "LUH ",
    "lld": "LAD ",
    "lmn": "LAM ",
    "ln": "LIN ",
    "lna": "BAD0",
    "lnl": "BAD0",
    "lo": "LAO ",
    "lou": "CPP ",
    "lri": "LUH ",
    "lrm": "LUH ",
    "lrt": "CPP ",
    "lsm": "LUH ",
    "lt": "LTH ",
    "ltg": "LVI ",
    "lto": "LUH ",
    "lts": "LUH ",
    "lu": "LUB ",
    "luh": "ZHS ",
    "lus": "MIZ ",
    "luy": "LUH ",
    "luz": "LRC ",
    "lv": "LVI ",
    "lvs": "LVI ",
    "lwg": "LUH ",
    "lzh": "ZHT ",
    "lzz": "LAZ ",
    "mai": "MTH ",
    "mak": "MKR ",
    "mam": "MAM ",
    "man": "MNK ",
    "max": "MLY ",
    "mbf": "CPP ",
    "mcm": "CPP ",
    "mct": "BTI ",
    "mdf": "MOK ",
    "mdy": "MLE ",
    "men": "MDE ",
    "meo": "MLY ",
    "mfa": "MFA ",
    "mfb": "MLY ",
    "mfe": "MFE ",
    "mfp": "CPP ",
    "mg": "MLG ",
    "mga": "SGA ",
    "mh": "MAH ",
    "mhc": "MYN ",
    "mhr": "LMA ",
    "mhv": "ARK ",
    "mi": "MRI ",
    "min": "MIN ",
    "mk": "MKD ",
    "mkn": "CPP ",
    "mku": "MNK ",
    "ml": "MAL ",
    "mlq": "MLN ",
    "mmr": "HMN ",
    "mn": "MNG ",
    "mnc": "MCH ",
    "mnh": "BAD0",
    "mnk": "MND ",
    "mnp": "ZHS ",
    "mns": "MAN ",
    "mnw": "MON ",
    "mo": "MOL ",
    "mod": "CPP ",
    "mop": "MYN ",
    "mpe": "MAJ ",
    "mqg": "MLY ",
    "mr": "MAR ",
    "mrh": "QIN ",
    "mrj": "HMA ",
    "ms": "MLY ",
    "msc": "MNK ",
    "msh": "MLG ",
    "msi": "MLY ",
    "mt": "MTS ",
    "mtr": "MAW ",
    "mud": "CPP ",
    "mui": "MLY ",
    "mup": "RAJ ",
    "muq": "HMN ",
    "mvb": "ATH ",
    "mve": "MAW ",
    "mvf": "MNG ",
    "mwk": "MNK ",
    "mwq": "QIN ",
    "mwr": "MAW ",
    "mww": "MWW ",
    "my": "BRM ",
    "mym": "MEN ",
    "myq": "MNK ",
    "myv": "ERZ ",
    "mzb": "BBR ",
    "mzs": "CPP ",
    "na": "NAU ",
    "nag": "NAG ",
    "nan": "ZHS ",
    "naz": "NAH ",
    "nb": "NOR ",
    "nch": "NAH ",
    "nci": "NAH ",
    "ncj": "NAH ",
    "ncl": "NAH ",
    "ncx": "NAH ",
    "nd": "NDB ",
    "ne": "NEP ",
    "nef": "CPP ",
    "ng": "NDG ",
    "ngl": "LMW ",
    "ngm": "CPP ",
    "ngo": "SXT ",
    "ngu": "NAH ",
    "nhc": "NAH ",
    "nhd": "GUA ",
    "nhe": "NAH ",
    "nhg": "NAH ",
    "nhi": "NAH ",
    "nhk": "NAH ",
    "nhm": "NAH ",
    "nhn": "NAH ",
    "nhp": "NAH ",
    "nhq": "NAH ",
    "nht": "NAH ",
    "nhv": "NAH ",
    "nhw": "NAH ",
    "nhx": "NAH ",
    "nhy": "NAH ",
    "nhz": "NAH ",
    "niq": "KAL ",
    "niv": "GIL ",
    "njt": "CPP ",
    "njz": "NIS ",
    "nkx": "IJO ",
    "nl": "NLD ",
    "nla": "BML ",
    "nle": "LUH ",
    "nln": "NAH ",
    "nlv": "NAH ",
    "nn": "NYN ",
    "nnh": "BML ",
    "nnz": "BML ",
    "no": "NOR ",
    "nod": "NTA ",
    "npi": "NEP ",
    "npl": "NAH ",
    "nqo": "NKO ",
    "nr": "NDB ",
    "nsk": "NAS ",
    "nsu": "NAH ",
    "nue": "BAD0",
    "nuu": "BAD0",
    "nuz": "NAH ",
    "nv": "NAV ",
    "nwe": "BML ",
    "ny": "CHI ",
    "nyd": "LUH ",
    "nyn": "NKL ",
    "oc": "OCI ",
    "oj": "OJB ",
    "ojc": "OJB ",
    "ojg": "OJB ",
    "ojs": "OCR ",
    "ojw": "OJB ",
    "okd": "IJO ",
    "oki": "KAL ",
    "okm": "KOH ",
    "okr": "IJO ",
    "om": "ORO ",
    "onx": "CPP ",
    "oor": "CPP ",
    "or": "ORI ",
    "orc": "ORO ",
    "orn": "MLY ",
    "orr": "IJO ",
    "ors": "MLY ",
    "ory": "ORI ",
    "os": "OSS ",
    "otw": "OJB ",
    "oua": "BBR ",
    "pa": "PAN ",
    "pap": "PAP0",
    "pbt": "PAS ",
    "pbu": "PAS ",
    "pce": "PLG ",
    "pck": "QIN ",
    "pcm": "CPP ",
    "pdu": "KRN ",
    "pea": "CPP ",
    "pel": "MLY ",
    "pes": "FAR ",
    "pey": "CPP ",
    "pga": "ARA ",
    "pi": "PAL ",
    "pih": "PIH ",
    "pis": "CPP ",
    "pkh": "QIN ",
    "pko": "KAL ",
    "pl": "PLK ",
    "plg": "PLG0",
    "pll": "PLG ",
    "pln": "CPP ",
    "plp": "PAP ",
    "plt": "MLG ",
    "pml": "CPP ",
    "pmy": "CPP ",
    "poc": "MYN ",
    "poh": "POH ",
    "pov": "CPP ",
    "ppa": "BAG ",
    "pre": "CPP ",
    "prp": "GUJ ",
    "prs": "DRI ",
    "ps": "PAS ",
    "pse": "MLY ",
    "pst": "PAS ",
    "pt": "PTG ",
    "pub": "QIN ",
    "puz": "QIN ",
    "pwo": "PWO ",
    "pww": "KRN ",
    "qu": "QUZ ",
    "qub": "QWH ",
    "quc": "QUC ",
    "qud": "QVI ",
    "quf": "QUZ ",
    "qug": "QVI ",
    "quh": "QUH ",
    "quk": "QUZ ",
    "qul": "QUH ",
    "qum": "MYN ",
    "qup": "QVI ",
    "qur": "QWH ",
    "qus": "QUH ",
    "quv": "MYN ",
    "quw": "QVI ",
    "qux": "QWH ",
    "quy": "QUZ ",
    "qva": "QWH ",
    "qvc": "QUZ ",
    "qve": "QUZ ",
    "qvh": "QWH ",
    "qvi": "QVI ",
    "qvj": "QVI ",
    "qvl": "QWH ",
    "qvm": "QWH ",
    "qvn": "QWH ",
    "qvo": "QVI ",
    "qvp": "QWH ",
    "qvs": "QUZ ",
    "qvw": "QWH ",
    "qvz": "QVI ",
    "qwa": "QWH ",
    "qwc": "QUZ ",
    "qwh": "QWH ",
    "qws": "QWH ",
    "qwt": "ATH ",
    "qxa": "QWH ",
    "qxc": "QWH ",
    "qxh": "QWH ",
    "qxl": "QVI ",
    "qxn": "QWH ",
    "qxo": "QWH ",
    "qxp": "QUZ ",
    "qxr": "QVI ",
    "qxt": "QWH ",
    "qxu": "QUZ ",
    "qxw": "QWH ",
    "rag": "LUH ",
    "ral": "QIN ",
    "rbb": "PLG ",
    "rbl": "BIK ",
    "rcf": "CPP ",
    "rif": "RIF ",
    "rki": "ARK ",
    "rm": "RMS ",
    "rmc": "ROY ",
    "rmf": "ROY ",
    "rml": "ROY ",
    "rmn": "ROY ",
    "rmo": "ROY ",
    "rmw": "ROY ",
    "rmy": "RMY ",
    "rmz": "ARK ",
    "rn": "RUN ",
    "ro": "ROM ",
    "rom": "ROY ",
    "rop": "CPP ",
    "rtc": "QIN ",
    "ru": "RUS ",
    "rue": "RSY ",
    "rw": "RUA ",
    "rwr": "MAW ",
    "sa": "SAN ",
    "sah": "YAK ",
    "sam": "PAA ",
    "sc": "SRD ",
    "scf": "CPP ",
    "sch": "QIN ",
    "sci": "CPP ",
    "sck": "SAD ",
    "scs": "SCS ",
    "sd": "SND ",
    "sdc": "SRD ",
    "sdh": "KUR ",
    "sdn": "SRD ",
    "sds": "BBR ",
    "se": "NSM ",
    "seh": "SNA ",
    "sek": "ATH ",
    "sez": "QIN ",
    "sfm": "SFM ",
    "sg": "SGO ",
    "sgc": "KAL ",
    "sgw": "CHG ",
    "sh": "BOS ",
    "shi": "SHI ",
    "shl": "QIN ",
    "shu": "ARA ",
    "shy": "BBR ",
    "si": "SNH ",
    "siz": "BBR ",
    "sjc": "ZHS ",
    "sjd": "KSM ",
    "sjo": "SIB ",
    "sjs": "BBR ",
    "sk": "SKY ",
    "skg": "MLG ",
    "skr": "SRK ",
    "skw": "CPP ",
    "sl": "SLV ",
    "sm": "SMO ",
    "sma": "SSM ",
    "smd": "MBN ",
    "smj": "LSM ",
    "smn": "ISM ",
    "sms": "SKS ",
    "smt": "QIN ",
    "sn": "SNA0",
    "snb": "IBA ",
    "so": "SML ",
    "spv": "ORI ",
    "spy": "KAL ",
    "sq": "SQI ",
    "sr": "SRB ",
    "src": "SRD ",
    "srm": "CPP ",
    "srn": "CPP ",
    "sro": "SRD ",
    "srs": "ATH ",
    "ss": "SWZ ",
    "ssh": "ARA ",
    "st": "SOT ",
    "sta": "CPP ",
    "stv": "SIG ",
    "su": "SUN ",
    "suq": "SUR ",
    "sv": "SVE ",
    "svc": "CPP ",
    "sw": "SWK ",
    "swb": "CMR ",
    "swc": "SWK ",
    "swh": "SWK ",
    "swn": "BBR ",
    "swv": "MAW ",
    "syc": "SYR ",
    "ta": "TAM ",
    "taa": "ATH ",
    "taq": "TAQ ",
    "tas": "CPP ",
    "tau": "ATH ",
    "tcb": "ATH ",
    "tce": "ATH ",
    "tch": "CPP ",
    "tcp": "QIN ",
    "tcs": "CPP ",
    "tcy": "TUL ",
    "tcz": "QIN ",
    "tdx": "MLG ",
    "te": "TEL ",
    "tec": "KAL ",
    "tem": "TMN ",
    "tez": "BBR ",
    "tfn": "ATH ",
    "tg": "TAJ ",
    "tgh": "CPP ",
    "tgj": "NIS ",
    "tgx": "ATH ",
    "th": "THA ",
    "tht": "ATH ",
    "thv": "THV ",
    "thz": "THZ ",
    "ti": "TGY ",
    "tia": "BBR ",
    "tig": "TGR ",
    "tjo": "BBR ",
    "tk": "TKM ",
    "tkg": "MLG ",
    "tl": "TGL ",
    "tmg": "CPP ",
    "tmh": "TMH ",
    "tmw": "MLY ",
    "tn": "TNA ",
    "tnf": "DRI ",
    "to": "TGN ",
    "tod": "TOD0",
    "toi": "TNG ",
    "toj": "MYN ",
    "tol": "ATH ",
    "tor": "BAD0",
    "tpi": "TPI ",
    "tr": "TRK ",
    "trf": "CPP ",
    "tru": "TUA ",
    "ts": "TSG ",
    "tt": "TAT ",
    "ttc": "MYN ",
    "ttm": "ATH ",
    "ttq": "TTQ ",
    "tuu": "ATH ",
    "tuy": "KAL ",
    "tvy": "CPP ",
    "tw": "TWI ",
    "txc": "ATH ",
    "txy": "MLG ",
    "ty": "THT ",
    "tyv": "TUV ",
    "tzh": "MYN ",
    "tzj": "MYN ",
    "tzm": "TZM ",
    "tzo": "TZO ",
    "ubl": "BIK ",
    "ug": "UYG ",
    "uk": "UKR ",
    "uki": "KUI ",
    "uln": "CPP ",
    "unr": "MUN ",
    "ur": "URD ",
    "urk": "MLY ",
    "usp": "MYN ",
    "uz": "UZB ",
    "uzn": "UZB ",
    "uzs": "UZB ",
    "vap": "QIN ",
    "ve": "VEN ",
    "vi": "VIT ",
    "vic": "CPP ",
    "vkk": "MLY ",
    "vkp": "CPP ",
    "vkt": "MLY ",
    "vls": "FLE ",
    "vmw": "MAK ",
    "vo": "VOL ",
    "vro": "VRO ",
    "vsn": "SAN ",
    "wa": "WLN ",
    "wbm": "WA  ",
    "wbr": "WAG ",
    "wea": "KRN ",
    "wes": "CPP ",
    "weu": "QIN ",
    "wlc": "CMR ",
    "wle": "SIG ",
    "wlk": "ATH ",
    "wni": "CMR ",
    "wo": "WLF ",
    "wry": "MAW ",
    "wsg": "GON ",
    "wuu": "ZHS ",
    "wya": "WDT ",
    "xal": "KLM ",
    "xan": "SEK ",
    "xh": "XHS ",
    "xmg": "BML ",
    "xmm": "MLY ",
    "xmv": "MLG ",
    "xmw": "MLG ",
    "xnj": "SXT ",
    "xnq": "SXT ",
    "xnr": "DGR ",
    "xpe": "XPE ",
    "xsl": "SSL ",
    "xst": "SIG ",
    "xup": "ATH ",
    "xwo": "TOD ",
    "yaj": "BAD0",
    "ybb": "BML ",
    "ybd": "ARK ",
    "ycr": "CPP ",
    "ydd": "JII ",
    "yi": "JII ",
    "yih": "JII ",
    "yo": "YBA ",
    "yos": "QIN ",
    "yua": "MYN ",
    "yue": "ZHH ",
    "za": "ZHA ",
    "zch": "ZHA ",
    "zdj": "CMR ",
    "zeh": "ZHA ",
    "zen": "BBR ",
    "zgb": "ZHA ",
    "zgh": "ZGH ",
    "zgm": "ZHA ",
    "zgn": "ZHA ",
    "zh": "ZHS ",
    "zhd": "ZHA ",
    "zhn": "ZHA ",
    "zkb": "KHA ",
    "zlj": "ZHA ",
    "zlm": "MLY ",
    "zln": "ZHA ",
    "zlq": "ZHA ",
    "zmi": "MLY ",
    "zmz": "BAD0",
    "zne": "ZND ",
    "zom": "QIN ",
    "zqe": "ZHA ",
    "zsm": "MLY ",
    "zu": "ZUL ",
    "zum": "LRC ",
    "zyb": "ZHA ",
    "zyg": "ZHA ",
    "zyj": "ZHA ",
    "zyn": "ZHA ",
    "zyp": "QIN ",
    "zzj": "ZHA ",
}
