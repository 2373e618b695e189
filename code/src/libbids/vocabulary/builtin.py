"""Built-in BIDS vocabulary.

Entity order, suffixes, extensions and datatype folders follow the BIDS
schema (objects.entities, objects.suffixes, objects.extensions and
objects.datatypes). Extension entries that denote directories and the
".*" wildcard are left out.
"""

ALNUM = "[a-zA-Z0-9]"
DIGITS = "[0-9]"

# (code, display name, value character class) in canonical order
BUILTIN_ENTITIES = [
    ("sub", "subject", ALNUM),
    ("ses", "session", ALNUM),
    ("sample", "sample", ALNUM),
    ("task", "task", ALNUM),
    ("tracksys", "tracksys", ALNUM),
    ("acq", "acquisition", ALNUM),
    ("nuc", "nucleus", ALNUM),
    ("voi", "volume", ALNUM),
    ("ce", "ceagent", ALNUM),
    ("trc", "tracer", ALNUM),
    ("stain", "stain", ALNUM),
    ("rec", "reconstruction", ALNUM),
    ("dir", "direction", ALNUM),
    ("run", "run", DIGITS),
    ("mod", "modality", ALNUM),
    ("echo", "echo", DIGITS),
    ("flip", "flip", DIGITS),
    ("inv", "inversion", DIGITS),
    ("mt", "mtransfer", ALNUM),
    ("part", "part", ALNUM),
    ("proc", "processing", ALNUM),
    ("hemi", "hemisphere", ALNUM),
    ("space", "space", ALNUM),
    ("split", "split", DIGITS),
    ("recording", "recording", ALNUM),
    ("chunk", "chunk", DIGITS),
    ("seg", "segmentation", ALNUM),
    ("res", "resolution", ALNUM),
    ("den", "density", ALNUM),
    ("label", "label", ALNUM),
    ("desc", "description", ALNUM),
]

BUILTIN_SUFFIXES = [
    "2PE", "BF", "Chimap", "CARS", "CONF", "DIC", "DF", "FLAIR", "FLASH", "FLUO",
    "IRT1", "M0map", "MEGRE", "MESE", "MP2RAGE", "MPE", "MPM", "MTR", "MTRmap",
    "MTS", "MTVmap", "MTsat", "MWFmap", "NLO", "OCT", "PC", "PD", "PDT2", "PDmap",
    "PDw", "PLI", "R1map", "R2map", "R2starmap", "RB1COR", "RB1map", "S0map",
    "SEM", "SPIM", "SR", "T1map", "T1rho", "T1w", "T2map", "T2star", "T2starmap",
    "T2starw", "T2w", "TB1AFI", "TB1DAM", "TB1EPI", "TB1RFM", "TB1SRGE",
    "TB1TFL", "TB1map", "TEM", "UNIT1", "VFA", "angio", "asl", "aslcontext",
    "asllabeling", "beh", "blood", "bold", "cbv", "channels", "coordsystem",
    "defacemask", "descriptions", "dseg", "dwi", "eeg", "electrodes", "epi",
    "events", "fieldmap", "headshape", "XPCT", "ieeg", "inplaneT1", "inplaneT2",
    "m0scan", "magnitude", "magnitude1", "magnitude2", "markers", "mask", "meg",
    "motion", "mrsi", "mrsref", "nirs", "noRF", "optodes", "pet", "phase",
    "phase1", "phase2", "phasediff", "photo", "physio", "probseg", "sbref",
    "scans", "sessions", "stim", "svs", "uCT", "unloc",
]  # fmt: skip

# The empty entry lets extension-less files (e.g. CTF .ds members) match
BUILTIN_EXTENSIONS = [
    ".ave", ".bdf", ".bval", ".bvec", ".chn", ".con", ".dat", ".dlabel.nii",
    ".edf", ".eeg", ".fdt", ".fif", ".jpg", ".json", ".kdf", ".label.gii", ".md",
    "", ".mhd", ".mrk", ".nii", ".nii.gz", ".nwb", ".ome.btf", ".ome.tif",
    ".png", ".pos", ".raw", ".rst", ".set", ".snirf", ".sqd", ".tif", ".trg",
    ".tsv", ".tsv.gz", ".txt", ".vhdr", ".vmrk",
]  # fmt: skip

BIDS_DATATYPES = [
    "anat",
    "beh",
    "dwi",
    "eeg",
    "fmap",
    "func",
    "ieeg",
    "meg",
    "micr",
    "motion",
    "mrs",
    "perf",
    "pet",
    "nirs",
]
