"""Application handlers (public: applicant-facing, private: administrator-facing)."""
