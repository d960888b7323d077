"""
Diagnosa — Compiled-in disease registry

Symptom vocabulary order is the canonical feature order of the model.
"""

from typing import Tuple

from diagnosa.schemas import Symptom, Disease


DEFAULT_SYMPTOMS: Tuple[Symptom, ...] = (
    Symptom(id="demam", label="Demam"),
    Symptom(id="batuk", label="Batuk"),
    Symptom(id="sakit-kepala", label="Sakit Kepala"),
    Symptom(id="kelelahan", label="Kelelahan"),
    Symptom(id="nyeri-otot", label="Nyeri Otot"),
    Symptom(id="hidung-tersumbat", label="Hidung Tersumbat"),
    Symptom(id="sesak-napas", label="Sesak Napas"),
    Symptom(id="kehilangan-indra-penciuman", label="Kehilangan Indra Penciuman/Perasa"),
    Symptom(id="batuk-berdarah", label="Batuk Berdarah"),
    Symptom(id="berkeringat-malam", label="Berkeringat di Malam Hari"),
    Symptom(id="penurunan-berat-badan", label="Penurunan Berat Badan"),
    Symptom(id="nyeri-dada", label="Nyeri Dada"),
    Symptom(id="mengi", label="Mengi (Napas Berbunyi)"),
    Symptom(id="nyeri-wajah", label="Nyeri Wajah/Sekitar Mata"),
    Symptom(id="mual", label="Mual"),
    Symptom(id="muntah", label="Muntah"),
    Symptom(id="sensitif-cahaya", label="Sensitif terhadap Cahaya"),
    Symptom(id="pusing", label="Pusing"),
)


DEFAULT_DISEASES: Tuple[Disease, ...] = (
    Disease(
        id="flu",
        name="Influenza (Flu)",
        description="Infeksi virus yang menyerang sistem pernapasan",
        symptoms=("demam", "batuk", "sakit-kepala", "kelelahan", "nyeri-otot", "hidung-tersumbat"),
        prior=0.15,
    ),
    Disease(
        id="covid",
        name="COVID-19",
        description="Infeksi virus SARS-CoV-2",
        symptoms=("demam", "batuk", "sesak-napas", "kelelahan", "kehilangan-indra-penciuman", "sakit-kepala"),
        prior=0.12,
    ),
    Disease(
        id="tbc",
        name="Tuberkulosis (TBC)",
        description="Infeksi bakteri pada paru-paru",
        symptoms=("batuk", "batuk-berdarah", "demam", "berkeringat-malam", "penurunan-berat-badan", "kelelahan"),
        prior=0.08,
    ),
    Disease(
        id="pneumonia",
        name="Pneumonia",
        description="Infeksi paru-paru yang menyebabkan peradangan",
        symptoms=("demam", "batuk", "sesak-napas", "nyeri-dada", "kelelahan"),
        prior=0.10,
    ),
    Disease(
        id="bronkitis",
        name="Bronkitis",
        description="Peradangan pada bronkus (saluran udara ke paru-paru)",
        symptoms=("batuk", "demam", "kelelahan", "sesak-napas", "nyeri-dada"),
        prior=0.13,
    ),
    Disease(
        id="asma",
        name="Asma",
        description="Penyakit kronis yang menyebabkan penyempitan saluran napas",
        symptoms=("sesak-napas", "batuk", "mengi", "nyeri-dada", "kelelahan"),
        prior=0.11,
    ),
    Disease(
        id="sinusitis",
        name="Sinusitis",
        description="Peradangan atau pembengkakan pada jaringan sinus",
        symptoms=("sakit-kepala", "hidung-tersumbat", "nyeri-wajah", "demam", "batuk"),
        prior=0.14,
    ),
    Disease(
        id="migrain",
        name="Migrain",
        description="Sakit kepala berat yang sering disertai mual",
        symptoms=("sakit-kepala", "mual", "muntah", "sensitif-cahaya", "pusing"),
        prior=0.09,
    ),
)
