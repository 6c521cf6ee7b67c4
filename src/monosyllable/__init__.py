"""monosyllable: learn syllable structure from IPA transcriptions and sample new syllables."""
