"""Physical modelling: modal resonators, a modal voice and dripping water."""